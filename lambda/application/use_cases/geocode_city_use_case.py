"""
Async Use Case: Geocode City
Busca de cidades brasileiras por nome (Open-Meteo Geocoding)
"""
from ddtrace import tracer

from application.ports.input.use_case_ports import IGeocodeCityUseCase
from application.ports.output.geocoding_provider_port import IGeocodingProvider
from application.dtos.requests import GeocodeRequest
from application.dtos.responses import GeocodeResponse
from domain.exceptions import LocationNotFoundException
from shared.utils.datetime_parser import DateTimeParser


class GeocodeCityUseCase(IGeocodeCityUseCase):

    def __init__(self, geocoding_provider: IGeocodingProvider):
        self.geocoding_provider = geocoding_provider

    @tracer.wrap(resource="use_case.geocode_city")
    async def execute(self, request: GeocodeRequest) -> GeocodeResponse:
        query = request.query
        locations = await self.geocoding_provider.search(query)
        brazilian = [location for location in locations if location.is_brazilian]

        if not brazilian:
            raise LocationNotFoundException(
                "Cidade não encontrada",
                details={"query": query, "results": []}
            )

        return GeocodeResponse(
            results=brazilian,
            query=query,
            timestamp=DateTimeParser.to_iso_utc(DateTimeParser.utc_now())
        )

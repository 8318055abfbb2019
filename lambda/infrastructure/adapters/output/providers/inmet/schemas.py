"""
Schemas dos payloads do INMET (parse-or-fail na fronteira do provider)

O INMET serializa números como strings ("23.4") e usa "" para ausência;
ambos são normalizados antes da validação.
"""
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InmetModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator('*', mode='before')
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class InmetStationSchema(InmetModel):
    """Item de GET /estacoes/T"""
    code: str = Field(alias='CD_ESTACAO', min_length=1)
    name: str = Field(alias='DC_NOME', min_length=1)
    state: str = Field(alias='SG_ESTADO', min_length=2, max_length=2)
    latitude: Optional[float] = Field(default=None, alias='VL_LATITUDE')
    longitude: Optional[float] = Field(default=None, alias='VL_LONGITUDE')
    altitude: Optional[float] = Field(default=None, alias='VL_ALTITUDE')
    situation: Optional[str] = Field(default=None, alias='CD_SITUACAO')
    station_type: Optional[str] = Field(default=None, alias='TP_ESTACAO')
    operating_since: Optional[str] = Field(default=None, alias='DT_INICIO_OPERACAO')


class InmetObservationSchema(InmetModel):
    """Item de GET /estacao/{inicio}/{fim}/{codigo} (horários em UTC)"""
    station_code: Optional[str] = Field(default=None, alias='CD_ESTACAO')
    date: str = Field(alias='DT_MEDICAO')
    hour: str = Field(alias='HR_MEDICAO')
    temperature: Optional[float] = Field(default=None, alias='TEM_INS')
    temperature_min: Optional[float] = Field(default=None, alias='TEM_MIN')
    temperature_max: Optional[float] = Field(default=None, alias='TEM_MAX')
    humidity: Optional[float] = Field(default=None, alias='UMD_INS')
    humidity_min: Optional[float] = Field(default=None, alias='UMD_MIN')
    humidity_max: Optional[float] = Field(default=None, alias='UMD_MAX')
    precipitation: Optional[float] = Field(default=None, alias='CHUVA')
    wind_direction: Optional[float] = Field(default=None, alias='VEN_DIR')
    wind_speed: Optional[float] = Field(default=None, alias='VEN_VEL')  # m/s
    wind_gust: Optional[float] = Field(default=None, alias='VEN_RAJ')  # m/s
    pressure: Optional[float] = Field(default=None, alias='PRE_INS')
    pressure_min: Optional[float] = Field(default=None, alias='PRE_MIN')
    pressure_max: Optional[float] = Field(default=None, alias='PRE_MAX')


class InmetAlertSchema(InmetModel):
    """Aviso meteorológico ativo"""
    id: Optional[Union[int, str]] = None
    states: List[str] = Field(default_factory=list, alias='estados')
    severity: Optional[str] = Field(default=None, alias='severidade')
    description: Optional[str] = Field(default=None, alias='descricao')
    start: Optional[str] = Field(default=None, alias='inicio')
    end: Optional[str] = Field(default=None, alias='fim')
    rain_1h: Optional[float] = Field(default=None, alias='chuva_1h')
    rain_24h: Optional[float] = Field(default=None, alias='chuva_24h')

    @field_validator('states', mode='before')
    @classmethod
    def split_states(cls, value: Any) -> Any:
        """Aceita lista de UFs ou string separada por vírgulas"""
        if value is None:
            return []
        if isinstance(value, str):
            return [part.strip() for part in value.split(',') if part.strip()]
        return value

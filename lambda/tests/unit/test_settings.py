"""
Unit tests for settings.py
"""
import importlib
import os

from unittest.mock import patch

from shared.config import settings
from shared.config.settings import internal_base_url


class TestInternalBaseUrl:

    def test_public_url_gets_https_scheme(self):
        assert internal_base_url('production', 'alerts.example.com/') == 'https://alerts.example.com'

    def test_public_url_with_scheme_is_kept(self):
        assert internal_base_url('development', 'http://api.local:9000') == 'http://api.local:9000'

    def test_production_without_public_url_disables_self_call(self):
        assert internal_base_url('production', '') == ''
        assert internal_base_url('Production', '') == ''

    def test_development_defaults_to_local_server(self):
        assert internal_base_url('development', '') == settings.LOCAL_BASE_URL


class TestSettingsFromEnvironment:

    def test_settings_from_environment(self):
        env = {
            'APP_ENV': 'Production',
            'HTTP_TIMEOUT_SECONDS': '20',
            'CORS_ORIGIN': 'https://test.example.com'
        }
        try:
            with patch.dict(os.environ, env):
                reloaded = importlib.reload(settings)

                assert reloaded.APP_ENV == 'production'
                assert reloaded.IS_PRODUCTION is True
                assert reloaded.internal_base_url(public_base_url='') == ''
                assert reloaded.HTTP_TIMEOUT_SECONDS == 20
                assert reloaded.CORS_ORIGIN == 'https://test.example.com'
        finally:
            importlib.reload(settings)

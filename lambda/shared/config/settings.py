"""
Configurações centralizadas da aplicação
"""
import os

# Ambiente ("development" / "production")
APP_ENV = os.environ.get('APP_ENV', 'development').lower()
IS_PRODUCTION = APP_ENV == 'production'

# URL pública do deploy (usada pela chamada interna ao próprio /api/weather)
PUBLIC_BASE_URL = os.environ.get('PUBLIC_BASE_URL', '').strip()
LOCAL_BASE_URL = os.environ.get('LOCAL_BASE_URL', 'http://localhost:8000')

# HTTP
HTTP_TIMEOUT_SECONDS = int(os.environ.get('HTTP_TIMEOUT_SECONDS', '15'))

# CORS
CORS_ORIGIN = os.environ.get('CORS_ORIGIN', '*')


def internal_base_url(app_env: str = None, public_base_url: str = None) -> str:
    """
    Base URL para chamadas internas à própria API

    Returns:
        URL com esquema, ou '' quando a chamada interna está desabilitada
        (produção sem PUBLIC_BASE_URL)
    """
    is_production = IS_PRODUCTION if app_env is None else app_env.lower() == 'production'
    public_base_url = PUBLIC_BASE_URL if public_base_url is None else public_base_url

    if public_base_url:
        if public_base_url.startswith(('http://', 'https://')):
            return public_base_url.rstrip('/')
        return f"https://{public_base_url.rstrip('/')}"

    if is_production:
        return ''

    return LOCAL_BASE_URL.rstrip('/')

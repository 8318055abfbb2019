"""RainViewer Provider Package"""
from infrastructure.adapters.output.providers.rainviewer.rainviewer_provider import RainViewerProvider

__all__ = ['RainViewerProvider']

"""Application Services"""
from application.services.cache_service import CacheResult, CacheService
from application.services.fallback_chain import FallbackChain
from application.services.batching import gather_in_batches

__all__ = ['CacheResult', 'CacheService', 'FallbackChain', 'gather_in_batches']

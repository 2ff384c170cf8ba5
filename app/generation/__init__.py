from app.generation.client_base import BaseGenerationClient
from app.generation.factory import GenerationClientFactory
from app.generation.normalizer import ResponseNormalizer
from app.generation.request_builder import RequestBuilder

__all__ = [
    "BaseGenerationClient",
    "GenerationClientFactory",
    "RequestBuilder",
    "ResponseNormalizer",
]

from .augmentor import InsightAugmentor, InsightConfigurationError, insight_cache_key
from .batcher import RequestBatcher
from .cache import CachedInsight, InsightCache
from .fallback import synthesize_insights
from .parser import parse_insights

__all__ = [
    "CachedInsight",
    "InsightAugmentor",
    "InsightCache",
    "InsightConfigurationError",
    "RequestBatcher",
    "insight_cache_key",
    "parse_insights",
    "synthesize_insights",
]

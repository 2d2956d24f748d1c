from .random_result import RandomResultService, generate_value, normalize_limit

__all__ = ["RandomResultService", "generate_value", "normalize_limit"]

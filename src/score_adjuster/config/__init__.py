from .logger_config import setup_logger
from .normalizer_config import NormalizerConfig, DEFAULT_CONFIG, create_config
from .policy_config import EstimatorConfig, TailCapConfig, LookupConfig, OutputConfig


__all__ = [
    #Logger Config
    "setup_logger",

    #Normalizer Config
    "NormalizerConfig",
    "DEFAULT_CONFIG",
    "create_config",

    #Policy Config
    "EstimatorConfig",
    "TailCapConfig",
    "LookupConfig",
    "OutputConfig",
]

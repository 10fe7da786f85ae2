from env.env import (
    ConfigError,
    Environment,
    FlowSettings,
    LoggingEnvironment,
    get_env,
    get_flow_settings,
    get_logging_env,
    logs_dir,
    reset_env_caches,
)

from env.paths import PROJECT_ROOT

__all__ = [
    "ConfigError",
    "Environment",
    "FlowSettings",
    "LoggingEnvironment",
    "get_env",
    "get_flow_settings",
    "get_logging_env",
    "logs_dir",
    "reset_env_caches",
    "PROJECT_ROOT",
]

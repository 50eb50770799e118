"""CLI Commands"""

from rmit.config import ConfigError, ConfigManager, API_KEY_ENV, CONFIG_KEYS
from rmit.output import accent, bold, dim, error, info, success, rule, print_error, print_success


def _api_key_status(is_set: bool) -> str:
    return accent("[SET]") if is_set else error("[NOT SET]")


def run_set(manager: ConfigManager, key: str, value: str) -> int:
    """Update one key in the config file.

    Starts from the stored file, not the environment, so an
    OPENROUTER_API_KEY in the environment is never written to disk.
    """
    config = manager.load_stored()
    try:
        config.set(key, value)
    except ConfigError as e:
        print_error(str(e))
        return 1

    try:
        path = manager.save(config)
    except OSError as e:
        print_error(f"Error saving configuration: {e}")
        return 1

    shown = "[SET]" if key == "api_key" else value
    print_success(f"Configuration updated: {accent(key)} = {info(shown)} {dim(f'({path})')}")
    return 0


def run_get(manager: ConfigManager, key: str | None = None) -> int:
    """Show one configuration value, or all of them."""
    config = manager.load()

    if key is not None:
        if key not in CONFIG_KEYS:
            print_error(f"Unknown configuration key: {key}. Valid keys are: {', '.join(CONFIG_KEYS)}")
            return 1
        if key == "api_key":
            print(_api_key_status(config.has_api_key))
        else:
            print(accent(config.get(key)))
        return 0

    print(f"\n{bold('Current configuration:')}")
    print(rule())
    print(f"{success('api_key:')} {_api_key_status(config.has_api_key)}")
    print(f"{success('api_url:')} {accent(config.api_url)}")
    print(f"{success('default_model:')} {accent(config.default_model)}")
    print(rule())

    if manager.env_api_key:
        print(f"\n{dim('Environment override:')} {API_KEY_ENV}")
    print(f"\n{success('Configuration stored at:')} {accent(str(manager.path))}")
    return 0

"""Top-level package for the Car Configurator.

Provides subpackages:
- car_configurator.core – option enums, compatibility catalog and the Car value
- car_configurator.builder – CarBuilder accumulator and the staged wizard
- car_configurator.documents – document formats, factory and editor
- car_configurator.integration – reports, orders, storage and system facade
"""

from importlib.metadata import PackageNotFoundError, version as pkg_version


def _get_version() -> str:
    """Installed distribution version, or 0.0.0 when running from a source tree."""
    try:
        return pkg_version("car-configurator")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]

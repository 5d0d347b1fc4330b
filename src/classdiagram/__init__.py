"""classdiagram: PlantUML class diagrams from source syntax trees."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("classdiagram")
except PackageNotFoundError:
    __version__ = "dev"

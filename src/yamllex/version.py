from importlib.metadata import PackageNotFoundError, version

try:
    version = version("YamlLex")
except PackageNotFoundError:
    version = "0.0.0"

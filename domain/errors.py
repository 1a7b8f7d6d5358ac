"""Error taxonomy for the catalog taxonomy engine."""


class TaxonomyError(Exception):
    """Base class for all catalog taxonomy errors."""


class MissingFileError(TaxonomyError, FileNotFoundError):
    """A required document directory or registry file does not exist."""


class RegistryNotFoundError(MissingFileError):
    """The theme registry to read or mutate does not exist."""


class RegistryFormatError(TaxonomyError, ValueError):
    """A registry file exists but is not valid JSON of the expected shape."""


class ThemeNotFoundError(TaxonomyError, KeyError):
    """A theme id was not found in the registry."""


class DuplicateThemeError(TaxonomyError, ValueError):
    """A theme with the same id already exists in the registry."""


class InvalidThemeIdError(TaxonomyError, ValueError):
    """A theme id is not a slug (it changes under tag normalization)."""

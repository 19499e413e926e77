import os
from collections import namedtuple
from .constants import DEFAULT_RDF_FORMAT, DEFAULT_RDF_FORMATS, \
    DEFAULT_HOST, DEFAULT_PORT
from yaml import load
try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader


class ConfigError(Exception):
    """Raised when the configuration cannot be used to serve a tree."""


FormatDescriptor = namedtuple(
    "FormatDescriptor", ["extension", "mime_type", "format_id"]
    )


class FormatRegistry():
    """Immutable table of the RDF formats that may be read and served.

    Descriptors are indexed once at construction so that per-request
    lookups by extension, MIME type or format id are dictionary hits.
    When several descriptors share a MIME type or a format id, the first
    one registered is the canonical entry for that key."""
    def __init__(self, descriptors):
        self._descriptors = tuple(descriptors)
        self._by_extension = {}
        self._by_format_id = {}
        self._by_mime_type = {}
        for descriptor in self._descriptors:
            if descriptor.extension in self._by_extension:
                raise ConfigError(
                    "Extension \"{0}\" is registered more than once".format(
                        descriptor.extension)
                    )
            self._by_extension[descriptor.extension] = descriptor
            self._by_format_id.setdefault(descriptor.format_id, descriptor)
            self._by_mime_type.setdefault(
                descriptor.mime_type.lower(), descriptor
                )

    @classmethod
    def from_config(cls, formats):
        """Build a registry from a list of {extension, mimeType, format}
        mappings as they appear in the YAML configuration."""
        descriptors = []
        for entry in formats:
            try:
                descriptors.append(FormatDescriptor(
                    extension=str(entry["extension"]).lstrip("."),
                    mime_type=str(entry["mimeType"]),
                    format_id=str(entry["format"])
                    ))
            except (KeyError, TypeError):
                raise ConfigError(
                    "Each validRdfFormats entry needs extension, mimeType "
                    "and format keys: {0}".format(entry)
                    )
        return cls(descriptors)

    def __iter__(self):
        return iter(self._descriptors)

    def __len__(self):
        return len(self._descriptors)

    def lookup_by_extension(self, extension):
        return self._by_extension.get(extension)

    def lookup_by_format_id(self, format_id):
        return self._by_format_id.get(format_id)

    def lookup_by_mime_type(self, mime_type):
        return self._by_mime_type.get(mime_type.lower())

    def acceptable_mime_types(self):
        """MIME types in configuration order, without repeats."""
        seen = []
        for descriptor in self._descriptors:
            if descriptor.mime_type not in seen:
                seen.append(descriptor.mime_type)
        return seen


class Config():
    """Object representing the options from the configuration file."""
    def __init__(self, opts, loggers=None):
        # initialize config defaults (will be overidden below if in config)
        self.source_dir = None
        self.default_format = DEFAULT_RDF_FORMAT
        self.formats = DEFAULT_RDF_FORMATS
        self.host = DEFAULT_HOST
        self.port = DEFAULT_PORT

        if opts is None:
            opts = {}
        if not isinstance(opts, dict):
            raise ConfigError("Configuration must be a mapping of options")

        if loggers is not None and opts:
            # log the key/value pairs loaded from configuration
            console = loggers.console
            console.info("Loaded the following configuration options:")
            pad = max([len(str(k)) for k in opts.keys()])
            for key, value in opts.items():
                console.info(
                    "  --> {:{align}{pad}} : {}".format(key, value,
                                                        pad=pad, align='>')
                    )

        for key, value in opts.items():
            if key == "sourceDirectory":
                self.source_dir = value
            elif key == "defaultRdfFormat":
                self.default_format = value
            elif key == "validRdfFormats":
                self.formats = value
            elif key == "host":
                self.host = value
            elif key == "port":
                self.port = value

        if not self.source_dir:
            raise ConfigError("No sourceDirectory specified in config file!")
        self.source_dir = os.path.abspath(self.source_dir)
        if not os.path.isdir(self.source_dir):
            raise ConfigError(
                "sourceDirectory {0} is not a directory".format(
                    self.source_dir)
                )

        if not isinstance(self.formats, list) or not self.formats:
            raise ConfigError("validRdfFormats must be a non-empty list")
        self.registry = FormatRegistry.from_config(self.formats)

        if self.registry.lookup_by_format_id(self.default_format) is None:
            raise ConfigError(
                "Unrecognized defaultRdfFormat \"{0}\" specified in config "
                "file!".format(self.default_format)
                )

        try:
            self.port = int(self.port)
        except (TypeError, ValueError):
            raise ConfigError("port must be an integer: {0}".format(self.port))

    @classmethod
    def from_file(cls, configfile, loggers=None):
        if loggers is not None:
            loggers.console.info(
                "Loading configuration options from {0}".format(configfile)
                )

        with open(configfile, "r") as f:
            yaml_data = f.read()

        return cls(load(yaml_data, Loader=Loader), loggers)

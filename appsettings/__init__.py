"""
Per-application settings and data documents on disk.

Documents are searched in the platform's standard directories (system-wide,
then per-user, then the working directory) and written atomically to the
per-user directory or, when portable, the working directory.
"""

from .codecs import Codec, JsonCodec, YamlCodec, available_formats, get_codec, register_codec
from .config import StoreConfig, resolve_config
from .core.errors import (
    ConfigError,
    DecodeError,
    NoWritableLocation,
    RecordTypeError,
    SettingsError,
    UnknownFormatError,
)
from .core.flags import DocFlags
from .data import (
    DataFlags,
    delete_data,
    get_data_paths,
    load_data,
    load_subdir_data,
    save_data,
)
from .settings import (
    delete_settings,
    get_settings_paths,
    load_settings,
    load_subdir_settings,
    save_settings,
)
from .stores.document_store import DocumentStore, shared_store
from .utils.atomic import safe_write
from .utils.paths import Category, DirectoryProvider, PlatformDirectoryProvider

__all__ = [
    "Category",
    "Codec",
    "ConfigError",
    "DataFlags",
    "DecodeError",
    "DirectoryProvider",
    "DocFlags",
    "DocumentStore",
    "JsonCodec",
    "NoWritableLocation",
    "PlatformDirectoryProvider",
    "RecordTypeError",
    "SettingsError",
    "StoreConfig",
    "UnknownFormatError",
    "YamlCodec",
    "available_formats",
    "delete_data",
    "delete_settings",
    "get_codec",
    "get_data_paths",
    "get_settings_paths",
    "load_data",
    "load_settings",
    "load_subdir_data",
    "load_subdir_settings",
    "register_codec",
    "resolve_config",
    "safe_write",
    "save_data",
    "save_settings",
    "shared_store",
]

"""Package manifest models.

This module defines the Pydantic model for the subset of package.json that
the build checks read, together with the tagged variant that the
conditional "exports" field is decoded into.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Sub-keys of a conditional exports mapping that name entry files
EXPORT_CONDITIONS: tuple[str, ...] = ("import", "require", "default", "types")


class MissingExports(BaseModel):
    """No usable "exports" field (absent, null, or an unsupported shape)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["missing"] = "missing"


class PathExport(BaseModel):
    """An "exports" field that resolves to a single path string.

    Attributes:
        path: Relative path to the exported file.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["path"] = "path"
    path: str


class ConditionalExports(BaseModel):
    """An "exports" root entry holding conditional sub-keys.

    Attributes:
        conditions: Condition name ("import", "require", "default", "types")
            mapped to the relative path declared for it.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["conditional"] = "conditional"
    conditions: dict[str, str] = Field(default_factory=dict)


Exports = Annotated[
    MissingExports | PathExport | ConditionalExports,
    Field(discriminator="kind"),
]


def decode_exports(raw: object) -> MissingExports | PathExport | ConditionalExports:
    """Decode a raw "exports" value into its tagged variant.

    A string is used directly. A mapping is narrowed to its "." key when that
    key is present and not null, otherwise the mapping itself is the root;
    the root is then either a string or a mapping of condition sub-keys.

    Args:
        raw: The value of "exports" as parsed from JSON.

    Returns:
        The decoded exports variant.
    """
    if isinstance(raw, str):
        return PathExport(path=raw)
    if not isinstance(raw, dict):
        return MissingExports()

    root = raw.get(".")
    if root is None:
        root = raw

    if isinstance(root, str):
        return PathExport(path=root)
    if isinstance(root, dict):
        return ConditionalExports(
            conditions={
                key: value
                for key in EXPORT_CONDITIONS
                if isinstance(value := root.get(key), str)
            }
        )
    return MissingExports()


def _string_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


class PackageManifest(BaseModel):
    """The fields of a package.json that the build checks depend on.

    Unknown keys are kept so the model accepts any real-world manifest.

    Attributes:
        name: Package name.
        version: Package version.
        private: True when the package must never be published.
        main: Primary entry point.
        module: Alternate ES module entry point.
        types: Type declaration entry point.
        typings: Alternate spelling of ``types``.
        type: Module type ("module" for ESM, anything else for CommonJS).
        files: Publication allowlist, or None when absent or not a list.
        exports: Decoded conditional exports.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str | None = None
    version: str | None = None
    private: bool = False
    main: str | None = None
    module: str | None = None
    types: str | None = None
    typings: str | None = None
    type: str | None = None
    files: list[str] | None = None
    exports: Exports = Field(default_factory=MissingExports)

    @field_validator(
        "name", "version", "main", "module", "types", "typings", "type", mode="before"
    )
    @classmethod
    def drop_non_strings(cls, v: Any) -> str | None:
        """Treat non-string values as if the field were absent."""
        return _string_or_none(v)

    @field_validator("private", mode="before")
    @classmethod
    def coerce_private(cls, v: Any) -> bool:
        """Any truthy value marks the package as private."""
        return bool(v)

    @field_validator("files", mode="before")
    @classmethod
    def normalize_files(cls, v: Any) -> list[str] | None:
        """Keep only string items; a non-list value counts as absent."""
        if not isinstance(v, list):
            return None
        return [item for item in v if isinstance(item, str)]

    @field_validator("exports", mode="before")
    @classmethod
    def decode_raw_exports(cls, v: Any) -> Any:
        """Decode the raw JSON value once, at load time."""
        if isinstance(v, MissingExports | PathExport | ConditionalExports):
            return v.model_dump()
        return decode_exports(v).model_dump()

    @property
    def is_module(self) -> bool:
        """Check if the package declares ES module semantics."""
        return self.type == "module"

    @property
    def types_entry(self) -> str | None:
        """Type declaration entry, preferring ``types`` over ``typings``."""
        return self.types or self.typings


def resolve_declared_entries(manifest: PackageManifest) -> frozenset[str]:
    """Collect every relative path the manifest declares as an entry point.

    Args:
        manifest: Parsed package manifest.

    Returns:
        Deduplicated set of declared relative paths. Empty strings are ignored.
    """
    candidates: list[str | None] = [manifest.main, manifest.module, manifest.types_entry]

    exports = manifest.exports
    if isinstance(exports, PathExport):
        candidates.append(exports.path)
    elif isinstance(exports, ConditionalExports):
        candidates.extend(exports.conditions.values())

    return frozenset(path for path in candidates if path)

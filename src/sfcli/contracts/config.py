"""Configuration contracts."""

from __future__ import annotations

from pathlib import PureWindowsPath

from pydantic import BaseModel, ConfigDict, Field, field_validator

SFLO_NAMESPACE = "http://semantic-flow.github.io/ontology/"
DC_NAMESPACE = "http://purl.org/dc/elements/1.1/"
SITE_TYPE = "sflo:SemanticFlowSite"


def is_plain_folder_name(name: str) -> bool:
    """Return whether *name* is a single directory name relative to the root.

    Absolute paths, ``.``/``..`` and anything containing a separator are
    rejected so folders always land inside the scaffolded root.
    """
    if not name or name in {".", ".."}:
        return False
    if "/" in name or "\\" in name:
        return False
    return not PureWindowsPath(name).drive


def _require_plain_folder_name(value: str) -> str:
    if not is_plain_folder_name(value):
        raise ValueError(f"{value!r} is not a plain folder name")
    return value


class InitDefaults(BaseModel):
    """Fallback values used when neither flags nor inference supply one.

    ``site_root_base`` is joined with the root directory name to form the
    default site root, e.g. ``http://localhost/my-site``.
    """

    site_root_base: str = "http://localhost/"
    output_dir: str = "docs"
    src_dir: str = "src"
    templates_dir: str = "templates"
    assets_dir: str = "_assets"
    creator: str = "unknown"
    description: str = "A Semantic Flow site"
    config_filename: str = "config.jsonld"

    model_config = ConfigDict(frozen=True)

    def default_site_root(self, root_name: str) -> str:
        return f"{self.site_root_base.rstrip('/')}/{root_name}"


class ScaffoldRequest(BaseModel):
    path: str
    explicit_site_root: str | None = None
    explicit_output_dir: str | None = None
    explicit_src_dir: str | None = None
    debug: bool = False

    model_config = ConfigDict(frozen=True)

    @field_validator("path", mode="before")
    @classmethod
    def _strip_path(cls, value: str) -> str:
        return str(value).strip()

    @field_validator("explicit_site_root", "explicit_output_dir", "explicit_src_dir", mode="before")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped = str(value).strip()
        return stripped or None


class FolderPlan(BaseModel):
    root_name: str = Field(min_length=1)
    output_dir_name: str = Field(min_length=1)
    src_dir_name: str = Field(min_length=1)
    templates_dir_name: str = Field(min_length=1)

    model_config = ConfigDict(frozen=True)

    @field_validator("output_dir_name", "src_dir_name", "templates_dir_name")
    @classmethod
    def _plain_folder_name(cls, value: str) -> str:
        return _require_plain_folder_name(value)


class JsonLdContext(BaseModel):
    base: str = Field(alias="@base", min_length=1)
    sflo: str = SFLO_NAMESPACE
    dc: str = DC_NAMESPACE

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ConfigDocument(BaseModel):
    """The ``config.jsonld`` document describing a Semantic Flow site."""

    context: JsonLdContext = Field(alias="@context")
    id: str = Field(default="", alias="@id")
    type: str = Field(default=SITE_TYPE, alias="@type")
    site_description: str = Field(alias="sflo:siteDescription", min_length=1)
    creator: str = Field(alias="dc:creator", min_length=1)
    source_folder: str = Field(alias="sflo:hasSourceFolder", min_length=1)
    output_folder: str = Field(alias="sflo:hasOutputFolder", min_length=1)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("source_folder", "output_folder")
    @classmethod
    def _plain_folder_name(cls, value: str) -> str:
        return _require_plain_folder_name(value)

    @property
    def site_root(self) -> str:
        return self.context.base

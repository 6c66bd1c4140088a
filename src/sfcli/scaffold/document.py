"""Build, load and serialise ``config.jsonld`` documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from sfcli.contracts.config import ConfigDocument, FolderPlan, JsonLdContext
from sfcli.contracts.exceptions import ConfigError
from sfcli.contracts.identity import SiteIdentity


def build_config_document(identity: SiteIdentity, folder_plan: FolderPlan, description: str) -> ConfigDocument:
    """Compose the JSON-LD document from resolved identity and folder names."""
    try:
        return ConfigDocument(
            context=JsonLdContext(base=identity.site_root),
            site_description=description,
            creator=identity.creator,
            source_folder=folder_plan.src_dir_name,
            output_folder=folder_plan.output_dir_name,
        )
    except ValidationError as exc:
        raise ConfigError(f"invalid config document: {exc}") from exc


def serialize_config_document(document: ConfigDocument) -> str:
    payload = document.model_dump(mode="json", by_alias=True)
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def load_config_document(path: str | Path) -> ConfigDocument:
    config_path = Path(path)
    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        return ConfigDocument.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

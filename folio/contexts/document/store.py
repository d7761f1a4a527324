"""
Local Document Store

Persists the single local resume document, together with the selected
variant id, as YAML. Every save writes the whole document.

File layout:
    document:
      template: modern
      resume:
        personalInfo: {...}
        experience: [...]
        ...
"""

import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

from folio.contexts.document.defaults import default_resume
from folio.contexts.document.exceptions import InvalidDocumentError
from folio.contexts.document.logger import _log_debug, _log_info
from folio.contexts.document.schema import ResumeSchema

load_dotenv()
DOCUMENT_PATH = Path(os.getenv("FOLIO_DOCUMENT_PATH", "data/resume.yaml"))


@dataclass
class StoredDocument:
    """
    Contents of the local document file.

    Attributes:
        resume: The resume schema
        variant_id: Variant id as saved; resolved by the rendering dispatcher
    """

    resume: ResumeSchema
    variant_id: Optional[str] = None


def save_document(
    resume: ResumeSchema,
    variant_id: Optional[str] = None,
    path: Path = None,
) -> Path:
    """
    Write the document to disk, replacing any previous version.

    The YAML is written to a temp file first and moved into place, so a
    failed write never leaves a truncated document behind.

    Args:
        resume: Resume to save
        variant_id: Selected variant id (stored as given)
        path: Target file (defaults to FOLIO_DOCUMENT_PATH)

    Returns:
        Path the document was written to
    """
    path = Path(path) if path is not None else DOCUMENT_PATH
    path.parent.mkdir(parents=True, exist_ok=True)

    config = OmegaConf.create(
        {"document": {"template": variant_id or "", "resume": resume.to_dict()}}
    )

    temp_fd, temp_path = tempfile.mkstemp(suffix=".yaml", dir=path.parent, text=True)
    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            f.write(OmegaConf.to_yaml(config))
        shutil.move(temp_path, path)
    except OSError:
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise

    _log_debug(f"Saved document to {path}")
    return path


def load_document(path: Path = None) -> StoredDocument:
    """
    Read the document from disk.

    A missing file is not an error: the sample resume is returned so a new
    workspace has something to render.

    Args:
        path: Source file (defaults to FOLIO_DOCUMENT_PATH)

    Returns:
        StoredDocument with the resume and saved variant id

    Raises:
        InvalidDocumentError: If the file is not valid YAML or lacks document.resume
    """
    path = Path(path) if path is not None else DOCUMENT_PATH

    if not path.exists():
        _log_info(f"No document at {path}, starting from the sample resume")
        return StoredDocument(resume=default_resume())

    try:
        config = OmegaConf.load(path)
    except yaml.YAMLError as e:
        raise InvalidDocumentError(f"Document is not valid YAML: {e}", path) from e

    if not isinstance(config, DictConfig) or "document" not in config:
        raise InvalidDocumentError("Missing 'document' key at root level", path)

    document = OmegaConf.to_container(config.document, resolve=True)
    if not isinstance(document, dict) or not isinstance(document.get("resume"), dict):
        raise InvalidDocumentError("Missing 'document.resume' mapping", path)

    variant_id = document.get("template") or None
    return StoredDocument(
        resume=ResumeSchema.from_dict(document["resume"]),
        variant_id=str(variant_id) if variant_id is not None else None,
    )

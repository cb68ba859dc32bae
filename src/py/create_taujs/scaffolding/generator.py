"""Project scaffolding generator.

This module writes the template catalog to disk under a new project root.
"""

import shutil
import uuid
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

import msgspec

from create_taujs.exceptions import DestinationExistsError
from create_taujs.scaffolding.templates import SCAFFOLD_DIRECTORIES, TEMPLATE_CATALOG, TemplateFile, TemplateKind
from create_taujs.utils import log_debug

if TYPE_CHECKING:
    from create_taujs.config import ProjectConfig


def encode_json(data: Any) -> bytes:
    """Serialize a mapping as 2-space indented JSON with a trailing newline.

    Args:
        data: The mapping to serialize.

    Returns:
        The encoded JSON document.
    """
    return msgspec.json.format(msgspec.json.encode(data), indent=2) + b"\n"


def render_file(template: TemplateFile, config: "ProjectConfig") -> bytes:
    """Render a catalog entry to the bytes written on disk.

    Args:
        template: The catalog entry.
        config: The project configuration.

    Returns:
        The file content.
    """
    content = template.render(config)
    if template.kind is TemplateKind.JSON:
        return encode_json(content)
    return content.encode("utf-8")


def create_directory_structure(root: Path) -> None:
    """Create the project root and its fixed directories.

    Args:
        root: The project root directory.
    """
    root.mkdir(parents=True, exist_ok=True)
    for directory in SCAFFOLD_DIRECTORIES:
        (root / directory).mkdir(parents=True, exist_ok=True)


def _write_files(root: Path, config: "ProjectConfig", catalog: Sequence[TemplateFile]) -> list[Path]:
    written: list[Path] = []
    for template in catalog:
        output_path = root / template.path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(render_file(template, config))
        written.append(output_path)
    return written


def _reserve_directory(path: Path) -> None:
    # Exclusive create: only this run may populate ``path``.
    try:
        path.mkdir()
    except FileExistsError as e:
        raise DestinationExistsError(str(path)) from e


def generate_project(
    target_dir: Path,
    config: "ProjectConfig",
    *,
    catalog: Sequence[TemplateFile] = TEMPLATE_CATALOG,
    atomic: bool = True,
) -> list[Path]:
    """Generate project files from the template catalog.

    When ``atomic`` is set, ``target_dir`` is first reserved as an empty
    directory, the project is assembled in a sibling staging directory, and
    the staged entries are moved into the reservation once every file is
    written, so a failure leaves nothing behind. Otherwise files are written
    in place and a failure leaves a partially populated directory.

    Args:
        target_dir: Project root to create. Must not exist.
        config: Project configuration used to render templates.
        catalog: The template entries to write.
        atomic: Whether to stage the project before moving it into place.

    Raises:
        DestinationExistsError: If ``target_dir`` already exists.

    Returns:
        List of generated file paths under ``target_dir``.
    """
    if target_dir.exists():
        raise DestinationExistsError(str(target_dir))

    if not atomic:
        create_directory_structure(target_dir)
        generated_files = _write_files(target_dir, config, catalog)
        for path in generated_files:
            log_debug(f"Created {path}")
        return generated_files

    target_dir.parent.mkdir(parents=True, exist_ok=True)
    _reserve_directory(target_dir)
    staging_dir = target_dir.parent / f".{target_dir.name}-{uuid.uuid4().hex[:8]}"
    try:
        staging_dir.mkdir()
        create_directory_structure(staging_dir)
        _write_files(staging_dir, config, catalog)
        for child in staging_dir.iterdir():
            child.rename(target_dir / child.name)
        staging_dir.rmdir()
    except BaseException:
        shutil.rmtree(staging_dir, ignore_errors=True)
        shutil.rmtree(target_dir, ignore_errors=True)
        raise

    generated_files = [target_dir / template.path for template in catalog]
    for path in generated_files:
        log_debug(f"Created {path}")
    return generated_files

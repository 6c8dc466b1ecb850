"""Utility functions for locating model documents and writing generated sources.

This module is the file-system boundary around the compiler: it turns
paths into ``(identifier, text)`` units and generated artifacts back
into files.
"""

from collections import Counter
from collections.abc import Iterable, Iterator
from pathlib import Path

from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_SCHEMA_SUFFIX = ".model.xml"


class SchemaLoaderError(Exception):
    """Custom exception for model document loading errors."""

    pass


def discover_schema_files(
    paths: Iterable[str | Path], suffix: str = DEFAULT_SCHEMA_SUFFIX
) -> list[Path]:
    """Collect model documents from files and directories.

    Directories are searched recursively for files ending in ``suffix``.
    Files given explicitly are kept even when their name does not match.

    Args:
        paths: Files and/or directories.
        suffix: File name suffix of model documents.

    Returns:
        Sorted, de-duplicated list of files.

    Raises:
        SchemaLoaderError: If a path does not exist.
    """
    found: set[Path] = set()

    for raw_path in paths:
        path = Path(raw_path)
        if not path.exists():
            logger.error(f"Path not found: {path}")
            raise SchemaLoaderError(f"Path not found: {path}")

        if path.is_dir():
            matches = [p for p in path.rglob(f"*{suffix}") if p.is_file()]
            logger.debug(f"Found {len(matches)} model documents under {path}")
            found.update(matches)
        else:
            if not path.name.endswith(suffix):
                logger.warning(f"File does not have {suffix} suffix: {path}")
            found.add(path)

    return sorted(found)


def read_schema_file(path: str | Path) -> tuple[str, str | None]:
    """Read one model document.

    Unreadable files produce ``None`` text so that the compiler skips
    them like any other broken unit.

    Returns:
        Tuple of (identifier, text or None).
    """
    path = Path(path)
    try:
        return str(path), path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read {path}: {e}")
        return str(path), None


def load_schema_units(
    paths: Iterable[str | Path], suffix: str = DEFAULT_SCHEMA_SUFFIX
) -> Iterator[tuple[str, str | None]]:
    """Yield ``(identifier, text)`` pairs for every discovered model document."""
    for path in discover_schema_files(paths, suffix):
        yield read_schema_file(path)


def find_duplicate_names(artifacts: Iterable[tuple[str, str]]) -> list[str]:
    """Return file names produced more than once, in sorted order."""
    counts = Counter(file_name for file_name, _ in artifacts)
    return sorted(name for name, count in counts.items() if count > 1)


def write_artifacts(
    artifacts: Iterable[tuple[str, str]], output_dir: str | Path
) -> tuple[list[Path], dict[str, str]]:
    """Write generated sources into a directory.

    Each file must land directly inside ``output_dir``. Names that would
    escape it, and files that cannot be written, are skipped and reported
    without stopping the remaining writes.

    Args:
        artifacts: (file name, source text) pairs.
        output_dir: Target directory, created when missing.

    Returns:
        Tuple of (written paths, {file name: failure reason}).

    Raises:
        SchemaLoaderError: If the output directory cannot be created.
    """
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Error creating output directory {output_dir}: {e}")
        raise SchemaLoaderError(f"Error creating {output_dir}: {e}") from e

    root = output_dir.resolve()
    written: list[Path] = []
    failures: dict[str, str] = {}
    seen: set[str] = set()

    for file_name, source in artifacts:
        target = output_dir / file_name
        if not file_name or target.resolve().parent != root:
            logger.warning(f"Refusing to write {file_name!r} outside {output_dir}")
            failures[file_name] = f"file name {file_name!r} is not inside the output directory"
            continue

        if file_name in seen:
            logger.warning(f"{file_name} was generated more than once; overwriting")
        seen.add(file_name)

        try:
            # newline="" keeps the generator's line endings untouched
            with target.open("w", encoding="utf-8", newline="") as f:
                f.write(source)
        except OSError as e:
            logger.error(f"Error writing {target}: {e}")
            failures[file_name] = f"could not write file: {e}"
            continue

        written.append(target)
        logger.debug(f"Wrote {target}")

    logger.info(f"Wrote {len(written)} files to {output_dir}")
    return written, failures

"""
Schema-to-source compiler.

Runs one model document through parse -> reconcile -> generate. A
compilation never raises for bad input: a broken document yields a
skipped result with no artifacts, and the batch carries on.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from ..logging_config import get_logger
from .core.generator import CodeGenerator, GeneratorError
from .core.parser import parse_schema
from .core.reconciler import build_entity_schema
from .core.schema import GeneratedArtifact
from .core.templates import TemplateError

logger = get_logger(__name__)

SchemaUnit = Tuple[str, Optional[str]]


class GenerationResult:
    """Container for the artifacts and diagnostics of one compiled unit."""

    def __init__(
        self,
        identifier: str,
        artifacts: List[GeneratedArtifact] = None,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            identifier: Identifier of the source unit (usually a path)
            artifacts: Generated files
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.identifier = identifier
        self.artifacts = artifacts or []
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.skipped = False
        self.skip_reason: Optional[str] = None
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def skip(
        cls, identifier: str, reason: str, warnings: List[str] = None
    ) -> "GenerationResult":
        """Create a result for a unit that produced nothing."""
        result = cls(identifier, warnings=warnings)
        result.skipped = True
        result.skip_reason = reason
        return result

    @classmethod
    def error(
        cls, identifier: str, message: str, exception: Exception = None
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(identifier)
        result.success = False
        result.error_message = message
        result.exception = exception
        return result

    def __repr__(self) -> str:
        state = "error" if not self.success else "skipped" if self.skipped else "ok"
        return (
            f"GenerationResult({self.identifier!r}, {state}, "
            f"artifacts={[a.file_identifier for a in self.artifacts]})"
        )


def _default_generator() -> CodeGenerator:
    from .registry import get_generator

    return get_generator("csharp")


def compile_schema(
    identifier: str,
    text: Optional[str],
    generator: Optional[CodeGenerator] = None,
) -> GenerationResult:
    """
    Compile one model document.

    Args:
        identifier: Identifier of the unit (used in diagnostics only)
        text: Raw XML text
        generator: Target generator (C# by default)

    Returns:
        GenerationResult holding two artifacts, or a skipped or failed result.
        Never raises.
    """
    generator = generator or _default_generator()
    try:
        return _compile(identifier, text, generator)
    except Exception as e:  # one unit must never take down the batch
        logger.error("Unexpected failure compiling %s: %s", identifier, e, exc_info=True)
        return GenerationResult.error(identifier, f"Unexpected failure: {e}", exception=e)


def _compile(
    identifier: str, text: Optional[str], generator: CodeGenerator
) -> GenerationResult:
    parsed = parse_schema(text)
    if not parsed.ok:
        logger.debug("Skipping %s: %s", identifier, parsed.skip_reason)
        return GenerationResult.skip(identifier, parsed.skip_reason)

    schema = build_entity_schema(parsed.schema)
    warnings = list(parsed.warnings) + generator.validate_schema(schema)

    try:
        artifacts = generator.generate(schema)
    except (GeneratorError, TemplateError) as e:
        logger.warning("Generation failed for %s: %s", identifier, e)
        return GenerationResult.error(
            identifier, f"Code generation failed: {e}", exception=e
        )

    metadata = {
        "entity": schema.name,
        "language": generator.language_name,
        "field_count": len(schema.fields),
        "entity_members": len(schema.entity_fields),
        "dto_members": len(schema.dto_fields),
        "mapped_fields": len(schema.shared_fields),
    }
    logger.debug("Compiled %s into %d artifacts", identifier, len(artifacts))
    return GenerationResult(identifier, artifacts, warnings, metadata)


def _compile_unit(unit: SchemaUnit, generator: CodeGenerator) -> GenerationResult:
    identifier, text = unit
    return compile_schema(identifier, text, generator)


def compile_batch(
    units: Iterable[SchemaUnit],
    generator: Optional[CodeGenerator] = None,
    max_workers: Optional[int] = None,
) -> List[GenerationResult]:
    """
    Compile many model documents concurrently.

    Each unit is an independent task; results come back in input order.

    Args:
        units: (identifier, raw text) pairs
        generator: Shared, stateless generator (C# by default)
        max_workers: Worker pool size (executor default when None)

    Returns:
        One GenerationResult per unit
    """
    units = list(units)
    if not units:
        return []

    generator = generator or _default_generator()
    if max_workers is not None:
        max_workers = max(1, max_workers)

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        results = list(executor.map(lambda unit: _compile_unit(unit, generator), units))

    compiled = sum(1 for r in results if r.success and not r.skipped)
    logger.info(
        "Compiled %d of %d model documents (%d skipped, %d failed)",
        compiled,
        len(results),
        sum(1 for r in results if r.skipped),
        sum(1 for r in results if not r.success),
    )
    return results


def iter_artifacts(results: Iterable[GenerationResult]) -> Iterator[Tuple[str, str]]:
    """Flatten results into (file identifier, source text) pairs."""
    for result in results:
        for artifact in result.artifacts:
            yield artifact.as_pair()

"""
xml-modelgen: entity/DTO source generation from XML model documents.
"""

from .codegen import (
    GenerationResult,
    GeneratorConfig,
    compile_batch,
    compile_schema,
    get_generator,
    iter_artifacts,
    load_config,
)

__version__ = "0.1.0"


def compile_text(text, language="csharp", config=None, identifier="<string>"):
    """
    Compile one model document given as a string.

    Args:
        text: XML model document
        language: Target language name
        config: Generator configuration dict, path or GeneratorConfig
        identifier: Name used in diagnostics

    Returns:
        Dict mapping generated file name to source text (empty when the
        document was skipped)
    """
    generator = get_generator(language, config)
    result = compile_schema(identifier, text, generator)
    return dict(iter_artifacts([result]))


__all__ = [
    "GenerationResult",
    "GeneratorConfig",
    "compile_batch",
    "compile_schema",
    "compile_text",
    "get_generator",
    "iter_artifacts",
    "load_config",
    "__version__",
]

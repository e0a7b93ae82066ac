"""Pipeline step functions: read, convert, and write orchestration"""

from pathlib import Path

from loguru import logger

from mdtree.config import Settings
from mdtree.core.convert import markdown_to_tiptap_dict
from mdtree.core.models import ConvertedDoc, SourceDoc
from mdtree.core.parse import discover_files, parse_file
from mdtree.core.render import markdown_to_html
from mdtree.exceptions import RendererUnavailable


def convert_doc(source: SourceDoc, settings: Settings) -> ConvertedDoc:
    """Convert a SourceDoc body to a tree or HTML according to settings.output_format."""
    result = ConvertedDoc(
        slug=source.slug,
        path=str(source.path),
        hash=source.hash,
        frontmatter=source.frontmatter,
        format=settings.output_format,
    )
    if settings.output_format == 'html':
        result.html = markdown_to_html(source.markdown, settings.parser_config, settings.breaks)
    else:
        result.doc = markdown_to_tiptap_dict(source.markdown, settings.parser_config, settings.breaks)
    return result


def write_doc(converted: ConvertedDoc, output_dir: Path, indent: int = 2) -> Path:
    """Write a ConvertedDoc as <slug>.json, or its HTML body as <slug>.html. Returns the file path."""
    if converted.format == 'html':
        out_file = output_dir / f"{converted.slug}.html"
        out_file.write_text(converted.html or '', encoding='utf-8')
    else:
        out_file = output_dir / f"{converted.slug}.json"
        out_file.write_text(converted.model_dump_json(indent=indent, exclude={'html'}), encoding='utf-8')
    return out_file


def run_convert(
    path: str,
    settings: Settings,
    output_dir: Path,
    ) -> list[tuple[Path, Path]]:
    """Convert every .md/.mdx file under path into output_dir. Returns (source_path, out_file) pairs."""
    output_dir.mkdir(parents=True, exist_ok=True)
    results = []
    for p in discover_files(Path(path)):
        try:
            converted = convert_doc(parse_file(p), settings)
            out_file = write_doc(converted, output_dir, settings.indent)
        except RendererUnavailable:
            raise
        except Exception as e:
            raise RuntimeError(f"Failed to convert {p}: {e}") from e
        logger.info("Converted {} -> {}", p, out_file)
        results.append((p, out_file))
    return results

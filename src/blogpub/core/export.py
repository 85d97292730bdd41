"""Page export: render post and index templates and write HTML files"""

from pathlib import Path
from typing import Optional

import jinja2

from blogpub.core.collection import make_collection
from blogpub.core.models import DocumentRecord


TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
POST_TEMPLATE = "post.html"
INDEX_TEMPLATE = "index.html"
INDEX_FILE = "index.html"


def make_environment(template_dir: Optional[Path] = None) -> jinja2.Environment:
    """Build an auto-escaping Jinja environment, preferring template_dir over bundled templates."""
    search_path = [TEMPLATES_DIR]
    if template_dir is not None:
        search_path.insert(0, Path(template_dir))
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(search_path),
        autoescape=jinja2.select_autoescape(["html"]),
        keep_trailing_newline=True,
    )


def render_post(env: jinja2.Environment, record: DocumentRecord) -> str:
    """Render a single post page."""
    return env.get_template(POST_TEMPLATE).render(post=record)


def render_index(env: jinja2.Environment, records: list[DocumentRecord]) -> str:
    """Render the listing page; records are sorted before rendering."""
    return env.get_template(INDEX_TEMPLATE).render(collection=make_collection(records))


def write_site(
    records: list[DocumentRecord],
    output_dir: Path,
    env: Optional[jinja2.Environment] = None,
    ) -> list[Path]:
    """Write each post to its output path plus index.html in output_dir.

    Returns written paths, posts first and the index last. Raises ValueError,
    before writing anything, if a post would be overwritten by the index.
    """
    env = env or make_environment()
    output_dir = Path(output_dir)
    index_path = output_dir / INDEX_FILE
    for record in records:
        if Path(record.output_path).resolve() == index_path.resolve():
            raise ValueError(f"Post {record.source_path} collides with the listing page {index_path}")

    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for record in records:
        target = Path(record.output_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(render_post(env, record), encoding="utf-8")
        written.append(target)

    index_path.write_text(render_index(env, records), encoding="utf-8")
    written.append(index_path)
    return written

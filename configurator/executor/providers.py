"""Provider composition.

The providers wrapper is never edited in place: it is rendered whole from
``templates/providers/index.tsx.j2`` according to which optional data layers
are present on disk. Nesting, outermost first, is
ErrorBoundary > ReduxProvider? > QueryClientProvider? > BrowserRouter.
"""

from __future__ import annotations

from pathlib import Path

from configurator.templates import TemplateRenderer
from configurator.utils import console

PROVIDERS_FILE = "src/app/providers/index.tsx"
REDUX_MARKER = "src/store/index.ts"
REACT_QUERY_MARKER = "src/services/api/queryClient.ts"


def providers_context(project_path: str | Path) -> dict[str, bool]:
    root = Path(project_path)
    return {
        "has_redux": (root / REDUX_MARKER).exists(),
        "has_react_query": (root / REACT_QUERY_MARKER).exists(),
    }


async def regenerate_providers(
    project_path: str | Path,
    renderer: TemplateRenderer | None = None,
) -> Path:
    """Rewrite the providers file from the layers detected in *project_path*.

    Idempotent: the output depends only on which marker files exist.
    """
    renderer = renderer or TemplateRenderer()
    context = providers_context(project_path)
    out = await renderer.render_to_file(
        "providers/index.tsx.j2", Path(project_path) / PROVIDERS_FILE, context
    )
    layers = [name.removeprefix("has_") for name, present in context.items() if present]
    console.print(
        f"  [dim]Regenerated {PROVIDERS_FILE} ({', '.join(layers) or 'router only'})[/dim]"
    )
    return out

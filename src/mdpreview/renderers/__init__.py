"""mdpreview renderers.

Renderers convert typed AST nodes into output formats.

Available Renderers:
- HtmlRenderer: Renders AST to an HTML fragment using StringBuilder pattern

Thread Safety:
Renderers keep per-call state in a RenderContext local to each render() call.
Safe for concurrent use from multiple threads.

"""

from mdpreview.renderers.html import HtmlRenderer, RenderContext

__all__ = ["HtmlRenderer", "RenderContext"]

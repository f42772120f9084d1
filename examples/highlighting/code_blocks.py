"""Render fenced code blocks with the built-in highlighters."""

from mdpreview import RenderConfig, highlight, supports_language, to_html
from mdpreview.config import render_config_context

source = """\
```js
const answer = (x) => x * 42; // the answer
```

```python
print("no highlighter, escaped only")
```
"""

print(to_html(source))

# Highlighters are usable on their own, too
for language in ("cs", "css", "html", "rust"):
    print(language, supports_language(language))
print(highlight("public record Point(int X, int Y);", "csharp"))

# Plain escaped blocks with a localized copy button
with render_config_context(RenderConfig(highlight=False, copy_button_label="Kopiera")):
    print(to_html(source))

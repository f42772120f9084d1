"""Compile markdown in one call: zero config, zero deps."""

from mdpreview import Markdown

md = Markdown()
html = md("# Hello **World**\n\n- [x] tokenize\n- [ ] render")
print(html)

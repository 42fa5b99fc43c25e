"""Task lists — checkboxes, labels, and Tiptap-compatible output."""

from casillas import create_markdown

source = """
Release checklist:

- [x] Tag the release
- [ ] Publish to PyPI
  - [ ] Build wheels
  - [X] Upload sdist
- Not a task
"""

md = create_markdown(enabled=True)
print(md.render(source))

# Label after the checkbox, wrapping the item text
md = create_markdown(options={"labelAfter": True, "listClass": "checklist"})
print(md.render(source))

# data-type / data-checked attributes for Tiptap editors
md = create_markdown(tiptap_compatible=True)
print(md.render(source))

"""Infrastructure layer — filesystem, markdown rendering, templates.

This layer depends on stdlib and third-party libs (Python-Markdown,
Pygments, Jinja2). Only the content repository bridges back into the
domain models.
"""

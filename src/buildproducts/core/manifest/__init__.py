"""Generated ``deps.py`` manifests.

- ``writer``: ``write_deps_file`` and ``render_deps_file``.
- ``template``: source text of the generated module.
"""

from buildproducts.core.manifest.writer import path_literal, render_deps_file, write_deps_file

__all__ = ["path_literal", "render_deps_file", "write_deps_file"]

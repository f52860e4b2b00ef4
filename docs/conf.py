from __future__ import annotations

from sphinx_api_relink.helpers import get_package_version

REPO_TITLE = "Pinned pre-commit manifest"
PACKAGE_NAME = "precommit_manifest"

api_target_substitutions: dict[str, str | tuple[str, str]] = {
    "P": "typing.ParamSpec",
    "P.args": ("attr", "typing.ParamSpec.args"),
    "P.kwargs": ("attr", "typing.ParamSpec.kwargs"),
    "Path": "pathlib.Path",
    "T": "typing.TypeVar",
}
autodoc_member_order = "bysource"
autodoc_typehints_format = "short"
autosectionlabel_prefix_document = True
copybutton_prompt_is_regexp = True
copybutton_prompt_text = r">>> |\.\.\. "  # doctest
default_role = "py:obj"
extensions = [
    "myst_parser",
    "sphinx.ext.autodoc",
    "sphinx.ext.autosectionlabel",
    "sphinx.ext.doctest",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
    "sphinx_api_relink",
    "sphinx_copybutton",
    "sphinxarg.ext",
]
generate_apidoc_package_path = f"../src/{PACKAGE_NAME}"
html_show_copyright = False
html_show_sourcelink = False
html_show_sphinx = False
html_sourcelink_suffix = ""
html_theme = "sphinx_book_theme"
html_theme_options = {
    "logo": {"text": REPO_TITLE},
    "path_to_docs": "docs",
    "show_navbar_depth": 2,
    "show_toc_level": 2,
}
html_title = REPO_TITLE
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "tomlkit": ("https://tomlkit.readthedocs.io/en/stable", None),
}
myst_enable_extensions = [
    "colon_fence",
]
nitpick_ignore_regex = [
    ("py:class", r"^.*.[A-Z]$"),
    (r"py:.*", r"ruamel\.yaml\..*"),
]
nitpicky = True
primary_domain = "py"
project = PACKAGE_NAME
release = get_package_version(PACKAGE_NAME)
version = get_package_version(PACKAGE_NAME)

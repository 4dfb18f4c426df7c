"""Sphinx configuration."""

# -- Project information -----------------------------------------------------

project = "image-sizes"
author = "Image Sizes Contributors"
copyright = "2026, Image Sizes Contributors"  # noqa: A001

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.intersphinx",
    "sphinxcontrib.autodoc_pydantic",
    "sphinx_copybutton",
    "myst_nb",
]

exclude_patterns = ["_build", ".DS_Store"]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "pydantic": ("https://docs.pydantic.dev/latest/", None),
    "sqlalchemy": ("https://docs.sqlalchemy.org/en/20/", None),
}

autodoc_typehints = "description"
autodoc_member_order = "groupwise"
autoclass_content = "class"

autodoc_pydantic_field_swap_name_and_alias = True
autodoc_pydantic_model_show_config_summary = False
autodoc_pydantic_model_show_validator_summary = False

html_theme = "furo"

copybutton_prompt_text = r">>> |\.\.\. |\$ "
copybutton_prompt_is_regexp = True

nb_execution_mode = "off"

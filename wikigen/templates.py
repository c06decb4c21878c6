from jinja2 import Template
from typing import Final

PARENT_LINK: Final[str] = "../"
DEFAULT_INDEX_TEMPLATE: Final[Template] = Template(
    """= Index of {{ dir_name }}
{% if dirs %}

.Directories
{% for d in dirs %}
* link:{{ d }}[]
{% endfor %}
{% endif %}
{% if files %}

.Files
{% for f in files %}
* <<{{ f }}#>>
{% endfor %}
{% endif %}
""",
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)

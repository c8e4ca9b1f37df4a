"""Render the onedriver template unit with Jinja2."""

from __future__ import annotations

from jinja2 import BaseLoader, Environment, StrictUndefined

_ENV = Environment(loader=BaseLoader(), trim_blocks=True, lstrip_blocks=True, undefined=StrictUndefined)

# %f is the instance unescaped as a path, i.e. the mountpoint
UNIT_TEMPLATE = """\
[Unit]
Description={{ description }}

[Service]
ExecStart={{ onedriver_path }} %f
ExecStopPost={{ fusermount_path }} -uz %f
Restart=on-abnormal
RestartSec=3
RestartForceExitStatus=2

[Install]
WantedBy=default.target
"""


def render_unit_template(onedriver_path: str, fusermount_path: str, description: str = "onedriver") -> str:
    tmpl = _ENV.from_string(UNIT_TEMPLATE)
    return tmpl.render(
        description=description,
        onedriver_path=onedriver_path,
        fusermount_path=fusermount_path,
    )

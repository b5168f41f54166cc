"""Service file templates for daemon management."""

# Restart policy baked into every unit. These are the only supervisory
# settings this package owns; everything else is left to systemd.
START_LIMIT_INTERVAL = 5
START_LIMIT_BURST = 10
RESTART_SEC = 120

SYSTEMD_UNIT = """\
[Unit]
Description={description}
ConditionFileIsExecutable={path}

[Service]
StartLimitInterval={start_limit_interval}
StartLimitBurst={start_limit_burst}
ExecStart={exec_start}
{optional_lines}Restart=always
RestartSec={restart_sec}

[Install]
WantedBy=multi-user.target
"""

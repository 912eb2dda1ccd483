"""Starter .secretsweep.toml template."""

DEFAULT_TOML = """\
# secretsweep configuration
version = "1.0"

[scan]
workers = 10                    # analyzer threads
queue_size = 100                # bounded path/result queues (backpressure)
max_file_size_mb = 5
include_all_severities = false  # false = report HIGH findings only
all_files = false               # true = ignore the extension allow-list
# extra_extensions = ["tpl", ".j2"]

[entropy]
enabled = true
threshold = 4.5                 # bits per symbol
min_length = 20
max_length = 100
# false_positive_markers = ["example", "sample", "placeholder", "test"]

[rules]
# enable = ["AWS_ACCESS_KEY_ID", "RSA_PRIVATE_KEY"]   # empty = all enabled
# disable = ["BEARER_TOKEN"]

[output]
format = "markdown"             # saved report: markdown | json
report_dir = "reports"
save_report = true
max_display = 25

[quarantine]
# target_dir = "./secure_vault"
"""

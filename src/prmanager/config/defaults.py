"""Starter .prmanager.toml template."""

DEFAULT_TOML = """\
# PR Manager configuration
version = "1.0"

[analyze]
fail_on = "high"          # never | low | medium | high; exit 1 at or above this risk level
max_files = 100
max_changed_lines = 6000

[output]
format = "terminal"       # terminal | json
show_files = true
redact_secrets = true

[rules]
# disable = ["touches_payment", "docs"]

[scoring]
# Weights and thresholds of the heuristic risk score.
# large_additions = 2000
# large_files = 50
# large_weight = 30
# medium_additions = 800
# medium_files = 25
# medium_weight = 15
# sensitive_weight = 25
# db_weight = 15
# db_without_tests_weight = 10
# major_bump_weight = 20
# many_deps_files = 5
# many_deps_weight = 10
# config_weight = 10
# public_api_weight = 10
# code_without_tests_weight = 15
# min_body_length = 20
# missing_body_weight = 5
# cleanup_with_tests_credit = 10
# low_risk_only_credit = 15
# high_level = 60
# medium_level = 30
"""

from pathwalk.testing import pathwalk_config  # noqa: F401

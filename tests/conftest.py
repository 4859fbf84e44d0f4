import os

from hypothesis import HealthCheck, settings

settings.register_profile(
    "unitdecode",
    max_examples=int(os.getenv("UNITDECODE_PROP_EXAMPLES", "300")),
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile("unitdecode")

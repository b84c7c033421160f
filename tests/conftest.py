from hypothesis import HealthCheck, settings

# Cold-start regex strategy compilation can trip the generation-speed health check.
settings.register_profile("default", suppress_health_check=[HealthCheck.too_slow])
settings.load_profile("default")

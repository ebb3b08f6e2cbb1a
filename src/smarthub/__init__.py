"""Smart home hub simulator: device registry, sleep timers and a FastAPI surface."""

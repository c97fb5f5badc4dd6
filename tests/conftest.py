import os

# Keep telemetry off the console while the suite runs.
os.environ.setdefault("NEOCODER_DISABLE_CONSOLE", "1")
os.environ.setdefault("NEOCODER_LOG_LEVEL", "WARNING")

import os

# Keep test runs from writing quiz_ingest.log into the working directory.
os.environ.setdefault("QUIZ_LOG_FILE", "")

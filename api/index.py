"""
Vercel serverless function entry point for the JobFit FastAPI app.
"""
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from web.app import app  # noqa: E402,F401

# Vercel picks up the ASGI 'app' variable

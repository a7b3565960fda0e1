"""
Text Moderation Gateway.

Classifies free-form text through a hosted Hugging Face inference model and
returns a normalized, ranked set of label/score pairs:
- Request validation (type and length checks before any network call)
- Inference gateway (upstream call, status-code error mapping, normalization)
- Verdict derivation (Hate Speech / No Hate / Neutral from the top label)

Architecture: FastAPI endpoint + httpx upstream client + typed error taxonomy
"""

__version__ = "0.1.0"

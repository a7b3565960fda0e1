"""
Unit tests for the Text Moderation Gateway.

Test individual components in isolation:
- Payload validation (type and length checks)
- Status-code mapping and response normalization
- Hugging Face client against a stub transport
- Verdict derivation and the analysis pipeline
"""

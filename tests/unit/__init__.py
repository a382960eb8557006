"""
Unit tests for the Entry Analysis Service.

Test individual components in isolation:
- Response normalizer (shape decoding, label/score and summary extraction)
- Scoring rules (sentiment range, stress score, suggestions)
- Analysis pipeline (stage order, summary fallback, error propagation)
- Inference client (httpx MockTransport)
- Token verification (Firebase Admin SDK patched)
- API models and dependencies
"""

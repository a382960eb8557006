"""
Entry Analysis Service.

Turns a free-text journal entry into a structured analysis:
- Sentiment polarity in [-1, 1]
- Dominant emotion and its confidence
- Short summary
- Stress score (0-10) with canned suggestions

Architecture: FastAPI endpoint + Firebase identity check + Hugging Face hosted inference
"""

__version__ = "0.1.0"

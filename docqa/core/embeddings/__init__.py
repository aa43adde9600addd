"""
Embedding providers.

Both providers implement langchain_core.embeddings.Embeddings and are
interchangeable at the pipeline boundary.
- LocalEmbeddings: sentence-transformers on the host
- RemoteEmbeddings: Google Generative AI embeddings
"""

from docqa.core.embeddings.embeddings_factory import get_embeddings
from docqa.core.embeddings.local_embeddings import LocalEmbeddings
from docqa.core.embeddings.remote_embeddings import RemoteEmbeddings

__all__ = ["LocalEmbeddings", "RemoteEmbeddings", "get_embeddings"]

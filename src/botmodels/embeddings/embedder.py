# src/botmodels/embeddings/embedder.py
"""
Sentence embedding model used to precompute query vectors.

Wraps a sentence-transformers model behind a single call,
embed(texts) -> one vector per text, so the generation pipeline can take any
object with the same method (tests use a fake).
"""
from typing import List, Optional

import numpy as np
import torch
from sentence_transformers import SentenceTransformer

from ..config import DEFAULT_EMBEDDING, NORMALIZE_EMBEDDINGS
from ..logger import get_logger

logger = get_logger("embeddings.embedder")


class Embedder:
    def __init__(
        self,
        model_name: str = DEFAULT_EMBEDDING,
        device: Optional[str] = None,
        normalize: bool = NORMALIZE_EMBEDDINGS,
    ):
        """
        Args:
            model_name: sentence-transformers model name or local path
            device: "cuda" / "cpu"; picked from torch when None
            normalize: L2-normalize vectors so dot product == cosine similarity
        """
        self.model_name = model_name
        self.device = device or ("cuda" if torch.cuda.is_available() else "cpu")
        self.normalize = normalize
        self.model = SentenceTransformer(model_name, device=self.device)
        logger.info(f"Encoder model '{model_name}' loaded on {self.device} (dim={self.dimension})")

    @property
    def dimension(self) -> int:
        return self.model.get_sentence_embedding_dimension()

    def embed(self, texts: List[str]) -> List[List[float]]:
        if not texts:
            return []
        emb = self.model.encode(
            list(texts),
            convert_to_numpy=True,
            normalize_embeddings=self.normalize,
            show_progress_bar=False,
        )
        return np.asarray(emb, dtype="float32").tolist()

"""
Abstract base client for text classification inference.

Defines the interface the API layer and the analysis pipeline depend on,
so the hosted backend can be swapped (or stubbed in tests) without
touching either of them.
"""

from abc import ABC, abstractmethod
from typing import Any

import structlog

from moderation_gateway.models.classification import ClassificationResult


logger = structlog.get_logger(__name__)


class BaseInferenceClient(ABC):
    """
    Abstract base class for inference clients.
    
    Responsibilities:
    - Send the classification request to the inference service
    - Map transport and HTTP failures to InferenceError subclasses
    - Normalize the payload into a ranked ClassificationResult
    
    Does NOT handle:
    - Payload validation (that's RequestValidator's job)
    - Verdict derivation (that's the pipeline's job)
    - Retries of any kind (callers decide based on InferenceError.retryable)
    """
    
    def __init__(self, base_url: str, model_id: str, timeout: float = 60.0):
        """
        Initialize base client.
        
        Args:
            base_url: Base URL of the inference service
            model_id: Model identifier appended to /models/
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.model_id = model_id
        self.timeout = timeout
    
    @abstractmethod
    async def infer(self, text: str) -> Any:
        """
        Run the upstream call and return the decoded JSON payload.
        
        Raises:
            InferenceTransportError: Network/timeout errors
            ModelLoadingError, ModelUnavailableError,
            AuthenticationFailedError, UpstreamError: non-2xx statuses
            MalformedResponseError: 2xx body that is not valid JSON
        """
        pass
    
    @abstractmethod
    async def classify(self, text: str) -> ClassificationResult:
        """
        Classify text and return ranked label/score percentages.
        
        Raises:
            InferenceError: Any subclass, see infer()
        """
        pass
    
    async def close(self):
        """
        Close client connections and cleanup resources.
        
        Default implementation does nothing.
        """
        logger.debug("Closing inference client", client_class=self.__class__.__name__)
    
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"base_url={self.base_url}, "
            f"model_id={self.model_id}, "
            f"timeout={self.timeout}s)"
        )

"""
S3 Vectors index service for production.

Implements the index service contract on Amazon S3 Vectors.
The vector bucket and AWS region are the index's cloud/region configuration.

Namespaces are emulated: every vector key is prefixed with "<namespace>/"
and carries a filterable "namespace" metadata key used to scope queries.
Chunk text is stored under the non-filterable "text" metadata key.

Dependencies: boto3, botocore, tenacity
System role: Production vector store (S3 Vectors)
"""

import logging
from typing import Any

import boto3
from botocore.exceptions import ClientError
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from docqa.boundary.vdb.vector_schemas import IndexDescriptor, RetrievedChunk, VectorRecord
from docqa.core.exceptions import IndexLifecycleError

logger = logging.getLogger(__name__)

TEXT_KEY = "text"
NAMESPACE_KEY = "namespace"
BATCH_SIZE = 500

_NOT_FOUND_CODES = {"NotFoundException", "ResourceNotFoundException"}
_THROTTLING_CODES = {"ThrottlingException", "TooManyRequestsException", "ServiceUnavailableException"}


def _error_code(error: ClientError) -> str:
    return error.response.get("Error", {}).get("Code", "")


def _is_throttling(error: BaseException) -> bool:
    return isinstance(error, ClientError) and _error_code(error) in _THROTTLING_CODES


def _sanitize_metadata(metadata: dict[str, Any]) -> dict[str, Any]:
    """Keep only scalar metadata values; S3 Vectors rejects nested objects."""
    return {
        key: value
        for key, value in metadata.items()
        if isinstance(value, (str, int, float, bool)) and key not in (TEXT_KEY, NAMESPACE_KEY)
    }


class S3VectorsIndexService:
    """
    S3 Vectors client for index lifecycle and namespace-scoped operations.
    """

    def __init__(
        self,
        vectors_bucket: str,
        region: str = "us-east-1",
        client: Any = None,
    ) -> None:
        """
        Initialize S3 Vectors client.

        Args:
            vectors_bucket: S3 Vectors bucket name
            region: AWS region of the bucket
            client: Preconfigured boto3 s3vectors client (tests)

        Raises:
            ValueError: When vectors_bucket is empty
        """
        if not vectors_bucket:
            raise ValueError("vectors_bucket cannot be empty")

        self._bucket = vectors_bucket
        self._region = region
        self._client = client or boto3.client("s3vectors", region_name=region)

    def describe_index(self, name: str) -> IndexDescriptor | None:
        try:
            response = self._client.get_index(vectorBucketName=self._bucket, indexName=name)
        except ClientError as e:
            if _error_code(e) in _NOT_FOUND_CODES:
                return None
            raise

        index = response["index"]
        return IndexDescriptor(
            name=name,
            dimension=int(index["dimension"]),
            metric=index.get("distanceMetric", "cosine"),
            region=self._region,
            cloud="aws",
        )

    def create_index(
        self,
        name: str,
        dimension: int,
        metric: str,
        region: str | None = None,
        cloud: str | None = None,
    ) -> None:
        if cloud and cloud != "aws":
            raise IndexLifecycleError(
                f"S3 Vectors indexes are hosted on aws, not {cloud}",
                operation="create",
            )
        if region and region != self._region:
            logger.warning(
                f"{__name__}:create_index - Requested region {region} differs from "
                f"bucket region {self._region}; using bucket region"
            )

        self._client.create_index(
            vectorBucketName=self._bucket,
            indexName=name,
            dataType="float32",
            dimension=dimension,
            distanceMetric=metric,
            metadataConfiguration={"nonFilterableMetadataKeys": [TEXT_KEY]},
        )
        logger.info(f"{__name__}:create_index - Created {name} (dimension={dimension}, metric={metric})")

    def delete_index(self, name: str) -> None:
        try:
            self._client.delete_index(vectorBucketName=self._bucket, indexName=name)
        except ClientError as e:
            if _error_code(e) not in _NOT_FOUND_CODES:
                raise

    def _list_keys(self, name: str, prefix: str) -> list[str]:
        keys: list[str] = []
        request: dict[str, Any] = {
            "vectorBucketName": self._bucket,
            "indexName": name,
            "maxResults": BATCH_SIZE,
        }
        while True:
            response = self._client.list_vectors(**request)
            keys.extend(
                vector["key"]
                for vector in response.get("vectors", [])
                if vector["key"].startswith(prefix)
            )
            next_token = response.get("nextToken")
            if not next_token:
                return keys
            request["nextToken"] = next_token

    def delete_namespace(self, name: str, namespace: str) -> None:
        try:
            keys = self._list_keys(name, f"{namespace}/")
        except ClientError as e:
            if _error_code(e) in _NOT_FOUND_CODES:
                logger.info(f"{__name__}:delete_namespace - Nothing to clear in {namespace}")
                return
            raise

        for start in range(0, len(keys), BATCH_SIZE):
            self._client.delete_vectors(
                vectorBucketName=self._bucket,
                indexName=name,
                keys=keys[start:start + BATCH_SIZE],
            )
        logger.info(f"{__name__}:delete_namespace - Deleted {len(keys)} vectors from {namespace}")

    def upsert(self, name: str, namespace: str, records: list[VectorRecord]) -> None:
        entries = [
            {
                "key": f"{namespace}/{record.id}",
                "data": {"float32": [float(v) for v in record.values]},
                "metadata": {
                    **_sanitize_metadata(record.metadata),
                    "chunk_id": record.id,
                    NAMESPACE_KEY: namespace,
                    TEXT_KEY: record.content,
                },
            }
            for record in records
        ]
        for start in range(0, len(entries), BATCH_SIZE):
            self._client.put_vectors(
                vectorBucketName=self._bucket,
                indexName=name,
                vectors=entries[start:start + BATCH_SIZE],
            )

    @retry(
        retry=retry_if_exception(_is_throttling),
        stop=stop_after_attempt(3),
        wait=wait_exponential_jitter(initial=1, max=10, jitter=2),
        before_sleep=lambda retry_state: logger.warning(
            f"{__name__}:query - Retry {retry_state.attempt_number}/3 after throttling"
        ),
        reraise=True,
    )
    def _query_with_retry(self, name: str, namespace: str, vector: list[float], top_k: int) -> dict:
        return self._client.query_vectors(
            vectorBucketName=self._bucket,
            indexName=name,
            queryVector={"float32": [float(v) for v in vector]},
            topK=top_k,
            filter={NAMESPACE_KEY: {"$eq": namespace}},
            returnMetadata=True,
            returnDistance=True,
        )

    def query(
        self,
        name: str,
        namespace: str,
        vector: list[float],
        top_k: int,
    ) -> list[RetrievedChunk]:
        response = self._query_with_retry(name, namespace, vector, top_k)

        results = []
        for match in response.get("vectors", []):
            metadata = dict(match.get("metadata") or {})
            content = metadata.pop(TEXT_KEY, "")
            metadata.pop(NAMESPACE_KEY, None)
            results.append(
                RetrievedChunk(
                    chunk_id=metadata.pop("chunk_id", match["key"]),
                    content=content,
                    score=1.0 - float(match.get("distance", 1.0)),
                    metadata=metadata,
                )
            )

        results.sort(key=lambda result: result.score, reverse=True)
        return results[:top_k]

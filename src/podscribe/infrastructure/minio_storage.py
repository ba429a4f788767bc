"""MinIO implementation of the StorageClient interface."""

from minio import Minio
from minio.error import S3Error

from podscribe.exceptions import StorageUploadError
from podscribe.logging import setup_logging

from .interfaces import StorageClient

logger = setup_logging()


class MinioStorageClient(StorageClient):
    """Handles file storage operations using MinIO."""

    def __init__(
        self,
        client: Minio,
        bucket_name: str,
        endpoint: str,
        public_base_url: str | None = None,
    ):
        self._client = client
        self._bucket_name = bucket_name
        self._base_url = (public_base_url or f"http://{endpoint}").rstrip("/")

    def upload_file(self, file_path: str, object_name: str, content_type: str) -> str:
        try:
            self._client.fput_object(
                bucket_name=self._bucket_name,
                object_name=object_name,
                file_path=file_path,
                content_type=content_type,
            )
            logger.info(
                "File uploaded to MinIO",
                extra={"bucket_name": self._bucket_name, "object_name": object_name},
            )
        except Exception as e:
            logger.exception(
                "MinIO upload failed",
                extra={"bucket_name": self._bucket_name, "object_name": object_name},
            )
            raise StorageUploadError(object_name, e) from e
        return self.object_url(object_name)

    def exists(self, object_name: str) -> bool:
        try:
            self._client.stat_object(self._bucket_name, object_name)
            return True
        except S3Error as e:
            if e.code in ("NoSuchKey", "NoSuchObject", "NoSuchBucket"):
                return False
            raise

    def object_url(self, object_name: str) -> str:
        return f"{self._base_url}/{self._bucket_name}/{object_name}"

    def ensure_bucket_exists(self) -> None:
        if not self._client.bucket_exists(self._bucket_name):
            self._client.make_bucket(self._bucket_name)
            logger.info("Bucket created", extra={"bucket_name": self._bucket_name})
        else:
            logger.info(
                "Bucket already exists", extra={"bucket_name": self._bucket_name}
            )

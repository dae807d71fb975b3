"""Service for loading Textract document analysis output from S3."""

import logging

from textract_query_results.exceptions import AnalysisOutputNotFoundError
from textract_query_results.infrastructure.s3_client import S3Client
from textract_query_results.models.textract import TextractDataModel

logger = logging.getLogger(__name__)


def _page_number(key: str) -> int | None:
    """Textract names output objects 1, 2, 3... under the job prefix."""
    name = key.rsplit("/", 1)[-1]
    return int(name) if name.isdigit() else None


def output_prefix(key: str, job_id: str | None = None) -> str:
    """Folder holding one job's output pages.

    Textract writes to <key>/<job_id>/N, so the job id is appended unless
    the key already ends with it. The trailing slash keeps sibling prefixes
    such as rec-10 out of a listing for rec-1.
    """
    prefix = key.rstrip("/")
    if job_id and prefix.rsplit("/", 1)[-1] != job_id:
        prefix = f"{prefix}/{job_id}"
    return f"{prefix}/"


class TextractService:
    """Reads analysis results written by an asynchronous Textract job."""

    def __init__(self, s3_client: S3Client):
        self._s3_client = s3_client

    def get_blocks_for_analysis(
        self,
        bucket: str | None,
        key: str | None,
        job_id: str | None = None,
    ) -> TextractDataModel:
        """Load every output page under s3://bucket/key into one model.

        Args:
            bucket: Bucket the Textract job wrote its output to.
            key: Output prefix of the job.
            job_id: Textract job id; narrows the listing to that job's folder.

        Returns:
            TextractDataModel with blocks from all pages, in page order.

        Raises:
            AnalysisOutputNotFoundError: If the location is missing or holds no output.
        """
        if not bucket or not key:
            raise AnalysisOutputNotFoundError(bucket, key, "missing bucket or key")

        prefix = output_prefix(key, job_id)
        objects = self._s3_client.list_objects(bucket=bucket, prefix=prefix)

        pages = []
        for obj in objects:
            page = _page_number(obj["Key"])
            if page is None:
                # .s3_access_check marker and anything else that is not a page
                logger.debug("Skipping s3://%s/%s", bucket, obj["Key"])
                continue
            pages.append((page, obj["Key"]))

        if not pages:
            raise AnalysisOutputNotFoundError(bucket, prefix, "no output objects")

        pages.sort()

        responses = [self._s3_client.get_object_json(bucket, k) for _, k in pages]
        model = TextractDataModel.from_responses(responses)

        logger.info(
            "Loaded %d blocks from %d output files at s3://%s/%s",
            len(model),
            len(pages),
            bucket,
            prefix,
        )
        return model

"""OCR adapter using AWS Textract"""
import asyncio
from functools import partial
from typing import List, Optional
import logging
import boto3
from pydantic import ValidationError
from botocore.exceptions import BotoCoreError, ClientError
from ..errors import ErrorKind, OCRError
from ..models.ocr import Block

logger = logging.getLogger(__name__)


class OCRService:
    """Extract text lines with bounding boxes from images stored in buckets"""

    def __init__(
        self,
        region_name: str = "us-east-1",
        feature_types: Optional[List[str]] = None,
        textract_client=None
    ):
        """
        Initialize the OCR adapter

        Args:
            region_name: AWS region of the Textract endpoint
            feature_types: Textract AnalyzeDocument feature types
            textract_client: Pre-built Textract client (created lazily if omitted)
        """
        self.region_name = region_name
        self.feature_types = feature_types or ["TABLES", "FORMS"]
        self._client = textract_client
        logger.info(f"OCRService initialized for region {region_name}")

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client("textract", region_name=self.region_name)
        return self._client

    async def analyze(self, bucket: str, key: str) -> List[Block]:
        """
        Run OCR on an object and return its flat block list

        Args:
            bucket: Bucket holding the image
            key: Object key of the image

        Returns:
            Blocks in the order Textract produced them

        Raises:
            OCRError: OCR_UNAVAILABLE on transport failure, OCR_REJECTED when
                Textract refuses the request
        """
        logger.info(f"Running OCR on {bucket}/{key}")

        request = partial(
            self.client.analyze_document,
            Document={"S3Object": {"Bucket": bucket, "Name": key}},
            FeatureTypes=self.feature_types,
        )

        try:
            # boto3 calls block
            loop = asyncio.get_running_loop()
            response = await loop.run_in_executor(None, request)
        except ClientError as e:
            logger.error(f"Textract rejected {bucket}/{key}: {e}")
            raise OCRError(
                ErrorKind.OCR_REJECTED, f"ocr request rejected for [{bucket}/{key}]"
            ) from e
        except BotoCoreError as e:
            logger.error(f"Textract unavailable for {bucket}/{key}: {e}")
            raise OCRError(ErrorKind.OCR_UNAVAILABLE, "ocr service unavailable") from e

        try:
            blocks = [Block.from_textract(raw) for raw in response.get("Blocks", [])]
        except (KeyError, ValidationError) as e:
            logger.error(f"Malformed Textract response for {bucket}/{key}: {e}")
            raise OCRError(
                ErrorKind.OCR_REJECTED, f"malformed ocr response for [{bucket}/{key}]"
            ) from e

        logger.info(f"OCR returned {len(blocks)} blocks for {bucket}/{key}")
        return blocks

from __future__ import annotations

import unittest
from unittest.mock import MagicMock

from botocore.exceptions import ClientError, EndpointConnectionError

from fakes import textract_line, textract_page
from findfile.errors import ErrorKind, OCRError
from findfile.services.ocr_service import OCRService


class TestOCRService(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.client = MagicMock()
        self.service = OCRService(textract_client=self.client)

    async def test_analyze_returns_blocks_in_order(self) -> None:
        self.client.analyze_document.return_value = {
            "Blocks": [
                textract_page("page-1", ["line-1"], page=1),
                textract_line("line-1", "alpha", 0.1, 0.1, 0.4, 0.2),
            ]
        }

        blocks = await self.service.analyze("b1", "p.jpg")

        self.client.analyze_document.assert_called_once_with(
            Document={"S3Object": {"Bucket": "b1", "Name": "p.jpg"}},
            FeatureTypes=["TABLES", "FORMS"],
        )
        self.assertEqual([b.block_type for b in blocks], ["PAGE", "LINE"])
        self.assertEqual(blocks[0].child_ids(), ["line-1"])
        self.assertEqual(blocks[0].page, 1)
        self.assertEqual(blocks[1].text, "alpha")
        self.assertAlmostEqual(blocks[1].bounding_box.width, 0.4)

    async def test_transport_failure_is_unavailable(self) -> None:
        self.client.analyze_document.side_effect = EndpointConnectionError(endpoint_url="https://textract")

        with self.assertRaises(OCRError) as ctx:
            await self.service.analyze("b1", "p.jpg")

        self.assertEqual(ctx.exception.kind, ErrorKind.OCR_UNAVAILABLE)

    async def test_rejected_request(self) -> None:
        self.client.analyze_document.side_effect = ClientError(
            {"Error": {"Code": "InvalidS3ObjectException", "Message": "no such object"}},
            "AnalyzeDocument",
        )

        with self.assertRaises(OCRError) as ctx:
            await self.service.analyze("b1", "missing.jpg")

        self.assertEqual(ctx.exception.kind, ErrorKind.OCR_REJECTED)
        self.assertIsInstance(ctx.exception.__cause__, ClientError)

    async def test_malformed_response_is_rejected(self) -> None:
        self.client.analyze_document.return_value = {"Blocks": [{"BlockType": "LINE"}]}

        with self.assertRaises(OCRError) as ctx:
            await self.service.analyze("b1", "p.jpg")

        self.assertEqual(ctx.exception.kind, ErrorKind.OCR_REJECTED)


if __name__ == "__main__":
    unittest.main()

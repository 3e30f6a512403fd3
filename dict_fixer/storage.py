"""
This module reads and writes word lists stored in S3.

Paths of the form s3://bucket/key are handled here; everything else is a local file.
"""

import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from dict_fixer.errors import ReadError, WriteError

S3_SCHEME = "s3://"

logger = logging.getLogger(__name__)


def is_s3_uri(path: str) -> bool:
    return path.startswith(S3_SCHEME)


def parse_s3_uri(uri: str) -> tuple:
    """
    Splits an S3 URI into its bucket and key.

    Args:
        uri (str): A URI such as s3://bucket/path/to/words.txt.

    Returns:
        tuple: The (bucket, key) pair.

    Raises:
        ValueError: If the URI is not an S3 URI or is missing a bucket or key.
    """
    if not is_s3_uri(uri):
        raise ValueError(f"Not an S3 URI: {uri}")
    bucket, _, key = uri[len(S3_SCHEME) :].partition("/")
    if not bucket or not key:
        raise ValueError(f"S3 URI must name a bucket and a key: {uri}")
    return bucket, key


def read_s3_text(uri: str, encoding: str = "utf-8", region: str = None) -> str:  # type: ignore
    """
    Downloads an S3 object and decodes it as text.

    Args:
        uri (str): The S3 URI of the object.
        encoding (str): The text codec used to decode the object.
        region (str): AWS region for the S3 client, or None for the default.

    Returns:
        str: The decoded object body.

    Raises:
        ReadError: If the object cannot be fetched or decoded.
    """
    try:
        bucket, key = parse_s3_uri(uri)
    except ValueError as err:
        logger.error(f"Error fetching {uri}: {err}")
        raise ReadError(uri, str(err)) from err

    logger.debug(f"Fetching s3 object {key} from bucket {bucket}")
    try:
        client = boto3.client("s3", region_name=region)
        response = client.get_object(Bucket=bucket, Key=key)
        body = response["Body"].read()
    except ClientError as err:
        error_message = err.response["Error"]["Message"]
        logger.error(f"Error fetching {uri}: {error_message}")
        raise ReadError(uri, error_message) from err
    except BotoCoreError as err:
        logger.error(f"Error fetching {uri}: {err}")
        raise ReadError(uri, str(err)) from err

    try:
        return body.decode(encoding)
    except (UnicodeDecodeError, LookupError) as err:
        logger.error(f"Error decoding {uri}: {err}")
        raise ReadError(uri, str(err)) from err


def write_s3_text(uri: str, text: str, encoding: str = "utf-8", region: str = None) -> None:  # type: ignore
    """
    Encodes text and uploads it as an S3 object, replacing any existing object at that key.

    Args:
        uri (str): The S3 URI of the destination object.
        text (str): The content to upload.
        encoding (str): The text codec used to encode the content.
        region (str): AWS region for the S3 client, or None for the default.

    Raises:
        WriteError: If the content cannot be encoded or the upload fails.
    """
    try:
        bucket, key = parse_s3_uri(uri)
        body = text.encode(encoding)
    except (ValueError, LookupError) as err:
        logger.error(f"Error uploading {uri}: {err}")
        raise WriteError(uri, str(err)) from err

    logger.debug(f"Uploading {len(body)} bytes to s3 object {key} in bucket {bucket}")
    try:
        client = boto3.client("s3", region_name=region)
        client.put_object(Bucket=bucket, Key=key, Body=body)
    except ClientError as err:
        error_message = err.response["Error"]["Message"]
        logger.error(f"Error uploading {uri}: {error_message}")
        raise WriteError(uri, error_message) from err
    except BotoCoreError as err:
        logger.error(f"Error uploading {uri}: {err}")
        raise WriteError(uri, str(err)) from err

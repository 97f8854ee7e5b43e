"""AWS SES email provider."""

import logging

from ... import conf
from .base import BaseProvider, SendResult

logger = logging.getLogger(__name__)


class SESEmailProvider(BaseProvider):
    """Email provider using AWS Simple Email Service (SES).

    Sends emails via the SES API using boto3. Credentials come from the
    usual boto3 chain (environment, profile, instance role).
    """

    provider_name = "ses"

    def __init__(self, region_name: str = None, configuration_set: str = None):
        self.region_name = region_name or conf.get_setting("SES_REGION")
        if configuration_set is None:
            configuration_set = conf.get_setting("SES_CONFIGURATION_SET")
        self.configuration_set = configuration_set

    def _get_client(self):
        """Create boto3 SES client."""
        import boto3

        return boto3.client("ses", region_name=self.region_name)

    def send(self, message) -> SendResult:
        """Send email via SES API."""
        try:
            client = self._get_client()

            send_params = {
                "Source": message.from_address,
                "Destination": {"ToAddresses": list(message.to)},
                "Message": {
                    "Subject": {"Data": message.subject, "Charset": "UTF-8"},
                    "Body": {"Text": {"Data": message.body, "Charset": "UTF-8"}},
                },
            }

            if self.configuration_set:
                send_params["ConfigurationSetName"] = self.configuration_set

            response = client.send_email(**send_params)
            message_id = response.get("MessageId", "")

            logger.info(f"SES email sent: {message_id} to {', '.join(message.to)}")
            return SendResult.ok(provider=self.provider_name, message_id=message_id)

        except Exception as e:
            error_msg = str(e)
            logger.error(f"SES send failed: {error_msg}")
            return SendResult.fail(provider=self.provider_name, error=error_msg)

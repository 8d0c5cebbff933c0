# services/mailer.py
"""
SMTP mail dispatcher for operator notifications

Builds a MIME message from a composed notification and hands it to the
configured SMTP relay with aiosmtplib. Transport failures are logged in full
and re-raised as MailTransportError.
"""

import asyncio
import logging
import uuid
from dataclasses import dataclass
from email import encoders
from email.mime.base import MIMEBase
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formatdate
from typing import Any, Dict, Optional

import aiosmtplib

from core.errors import MailTransportError
from core.models import ComposedNotification

logger = logging.getLogger(__name__)


@dataclass
class SMTPSettings:
    """Connection settings for the SMTP relay"""
    host: str
    port: int
    username: str = ''
    password: str = ''
    use_tls: bool = False
    start_tls: bool = False
    timeout: float = 60

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> 'SMTPSettings':
        return cls(
            host=config['SMTP_HOST'],
            port=int(config['SMTP_PORT']),
            username=config.get('SMTP_USER', ''),
            password=config.get('SMTP_PASSWORD', ''),
            use_tls=config.get('SMTP_USE_TLS', False),
            start_tls=config.get('SMTP_STARTTLS', False),
            timeout=config.get('SMTP_TIMEOUT', 60),
        )


class MailDispatcher:
    """Sends composed notifications to the fixed operator mailbox"""

    def __init__(self, settings: SMTPSettings, sender: str, recipient: str):
        self.settings = settings
        self.sender = sender
        self.recipient = recipient

    def build_message(self, notification: ComposedNotification) -> MIMEMultipart:
        msg = MIMEMultipart('mixed')

        msg['Subject'] = notification.subject
        msg['From'] = self.sender
        msg['To'] = self.recipient
        msg['Reply-To'] = notification.reply_to
        msg['Date'] = formatdate(localtime=True)
        domain = self.sender.rpartition('@')[2] or 'localhost'
        msg['Message-ID'] = f"<{uuid.uuid4()}@{domain}>"

        msg.attach(MIMEText(notification.html, 'html', 'utf-8'))

        for attachment in notification.attachments:
            maintype, _, subtype = (attachment.content_type or 'application/octet-stream').partition('/')
            part = MIMEBase(maintype, subtype or 'octet-stream')
            part.set_payload(attachment.data)
            encoders.encode_base64(part)
            part.add_header('Content-Disposition', 'attachment', filename=attachment.filename)
            msg.attach(part)

        return msg

    def send(self, notification: ComposedNotification) -> Optional[str]:
        """
        Deliver a notification synchronously

        Returns:
            Message-ID of the accepted message

        Raises:
            MailTransportError: on any SMTP or connection failure, or
                TLS options the client rejects
        """
        msg = self.build_message(notification)
        try:
            asyncio.run(self._async_send(msg))
        except (aiosmtplib.SMTPException, OSError, asyncio.TimeoutError, ValueError) as e:
            logger.error(
                f"SMTP delivery to {self.settings.host}:{self.settings.port} failed: {e}",
                exc_info=True,
            )
            raise MailTransportError(str(e)) from e

        logger.info(f"Notification relayed: {notification.subject!r} ({msg['Message-ID']})")
        return msg['Message-ID']

    async def _async_send(self, msg: MIMEMultipart) -> None:
        smtp = aiosmtplib.SMTP(
            hostname=self.settings.host,
            port=self.settings.port,
            timeout=self.settings.timeout,
            use_tls=self.settings.use_tls,
            start_tls=self.settings.start_tls,
        )

        await smtp.connect()
        try:
            if self.settings.username and self.settings.password:
                await smtp.login(self.settings.username, self.settings.password)
            await smtp.send_message(msg)
        finally:
            if smtp.is_connected:
                await smtp.quit()

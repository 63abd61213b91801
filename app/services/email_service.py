"""
Email Service - optional notifications to the site owner.

A contact message or feedback submission triggers a notification when
EMAIL_USER and EMAIL_PASS are configured. Delivery failures are logged and
never reported to the visitor.
"""

import html
import logging
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

import aiosmtplib

from app.core.config import get_settings

logger = logging.getLogger(__name__)


class EmailService:
    """Async SMTP sender"""

    def __init__(self):
        settings = get_settings()
        self.smtp_host = settings.email_host
        self.smtp_port = settings.email_port
        self.smtp_user = settings.email_user
        self.smtp_password = settings.email_pass
        self.owner_email = settings.email_from or settings.email_user

    @property
    def is_configured(self) -> bool:
        return bool(self.smtp_user and self.smtp_password)

    async def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        text_content: Optional[str] = None
    ) -> bool:
        """
        Send an email.

        Returns True if successful, False otherwise.
        """
        if not self.is_configured:
            logger.debug("Email not configured, skipping send")
            return False

        message = MIMEMultipart("alternative")
        message["From"] = self.smtp_user
        message["To"] = to_email
        message["Subject"] = subject
        if text_content:
            message.attach(MIMEText(text_content, "plain"))
        message.attach(MIMEText(html_content, "html"))

        try:
            await aiosmtplib.send(
                message,
                hostname=self.smtp_host,
                port=self.smtp_port,
                username=self.smtp_user,
                password=self.smtp_password,
                start_tls=True,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error("Email sending failed to %s: %s", to_email, e)
            return False

        logger.info("Sent email to %s: %s", to_email, subject)
        return True

    async def notify_contact_message(self, name: str, email: str, subject: str, message: str) -> bool:
        # name/subject/message arrive HTML-escaped already
        return await self.send_email(
            to_email=self.owner_email,
            subject=f"New Contact Form Message: {html.unescape(subject)}",
            text_content=f"You have a new message from {html.unescape(name)} ({email}):\n\n{html.unescape(message)}",
            html_content=(
                "<h2>New Contact Form Message</h2>"
                f"<p><strong>From:</strong> {name} ({html.escape(email)})</p>"
                f"<p><strong>Subject:</strong> {subject}</p>"
                "<p><strong>Message:</strong></p>"
                f"<p>{message}</p>"
            ),
        )

    async def notify_feedback(self, name: str, email: str, rating: int, feedback: str) -> bool:
        plural = "s" if rating > 1 else ""
        return await self.send_email(
            to_email=self.owner_email,
            subject=f"New Feedback Received: {rating} Star{plural}",
            text_content=(
                f"You have received new feedback from {name} ({email}):\n\n"
                f"Rating: {rating}/5\n\nFeedback:\n{feedback}"
            ),
            html_content=(
                "<h2>New Feedback Received</h2>"
                f"<p><strong>From:</strong> {html.escape(name)} ({html.escape(email)})</p>"
                f"<p><strong>Rating:</strong> {rating}/5</p>"
                "<p><strong>Feedback:</strong></p>"
                f"<p>{html.escape(feedback)}</p>"
            ),
        )


def get_email_service() -> EmailService:
    return EmailService()

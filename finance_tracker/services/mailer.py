"""
Outgoing email. Without EMAIL_USER/EMAIL_PASS the message is logged instead of sent,
which is how development setups receive their verification codes.
"""
import logging
import smtplib
from email.message import EmailMessage

from ..config import settings

logger = logging.getLogger(__name__)


class MailerError(Exception):
    """Raised when a message could not be handed to the SMTP server"""


class Mailer:
    def __init__(self, config=settings):
        self.config = config

    @property
    def configured(self) -> bool:
        return bool(self.config.EMAIL_USER and self.config.EMAIL_PASS)

    def send(self, to: str, subject: str, body: str) -> None:
        if not self.configured:
            logger.info("[DEV MODE] Email to %s, subject %r:\n%s", to, subject, body)
            return

        message = EmailMessage()
        message["From"] = f"{self.config.FROM_NAME} <{self.config.FROM_EMAIL}>"
        message["To"] = to
        message["Subject"] = subject
        message.set_content(body)

        try:
            with smtplib.SMTP(self.config.EMAIL_HOST, self.config.EMAIL_PORT, timeout=30) as smtp:
                smtp.starttls()
                smtp.login(self.config.EMAIL_USER, self.config.EMAIL_PASS)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            raise MailerError(str(e)) from e

        logger.info("Email sent to %s", to)


def get_mailer() -> Mailer:
    """Dependency returning the mailer; tests override it"""
    return Mailer()

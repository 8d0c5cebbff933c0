# core/template_engine.py
"""
Notification composer for intake submissions

Renders the operator notification with Jinja2. Autoescaping is always on,
so submitted values cannot inject markup into the email body.
"""

import logging
from datetime import datetime
from typing import Any, Dict

from jinja2 import Environment, select_autoescape, StrictUndefined
from jinja2.exceptions import TemplateError

from core import email_templates
from core.errors import TemplateRenderingError
from core.models import ComposedNotification, InsuranceInquiry, JobApplication

logger = logging.getLogger(__name__)


def single_line(value: str) -> str:
    """Collapse whitespace, including CR/LF, so the value is safe in a header"""
    return ' '.join(value.split())


class NotificationComposer:
    """
    Builds operator notifications from validated intake records

    Subjects are rendered without autoescaping and flattened to a single line;
    bodies are rendered as autoescaped HTML.
    """

    def __init__(self,
                 position: str = 'Sales Agent',
                 source_label: str = 'Jubilee Health Insurance Landing Page'):
        self.position = position
        self.source_label = source_label

        self.html_env = Environment(
            autoescape=select_autoescape(['html', 'xml'], default_for_string=True),
            undefined=StrictUndefined,  # Fail on undefined variables
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.text_env = Environment(
            autoescape=False,
            undefined=StrictUndefined,
        )

        self._templates = {
            'job_application': (
                self.text_env.from_string(email_templates.JOB_APPLICATION_SUBJECT),
                self.html_env.from_string(email_templates.JOB_APPLICATION_HTML),
            ),
            'insurance_inquiry': (
                self.text_env.from_string(email_templates.INSURANCE_INQUIRY_SUBJECT),
                self.html_env.from_string(email_templates.INSURANCE_INQUIRY_HTML),
            ),
        }

    def _render(self, name: str, variables: Dict[str, Any]):
        subject_template, html_template = self._templates[name]
        variables = dict(variables,
                         position=self.position,
                         source_label=self.source_label)
        start_time = datetime.now()
        try:
            subject = single_line(subject_template.render(**variables))
            html = html_template.render(**variables)
        except TemplateError as e:
            logger.error(f"Failed to render {name} notification: {e}")
            raise TemplateRenderingError(str(e)) from e

        render_ms = (datetime.now() - start_time).total_seconds() * 1000
        logger.debug(f"Rendered {name} notification in {render_ms:.1f}ms ({len(html)} bytes)")
        return subject, html

    def compose_job_application(self, application: JobApplication) -> ComposedNotification:
        subject, html = self._render('job_application', {'application': application})
        return ComposedNotification(
            subject=subject,
            html=html,
            reply_to=application.email,
            attachments=[application.cv],
        )

    def compose_insurance_inquiry(self, inquiry: InsuranceInquiry) -> ComposedNotification:
        subject, html = self._render('insurance_inquiry', {'inquiry': inquiry})
        return ComposedNotification(
            subject=subject,
            html=html,
            reply_to=inquiry.email,
        )

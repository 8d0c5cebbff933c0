"""
Tests for plan selection and notification composition
"""

import pytest

from core.errors import IntakeError, TemplateRenderingError
from core.models import Attachment, InsuranceInquiry, InsuranceType, JobApplication
from core.template_engine import NotificationComposer, single_line


@pytest.fixture
def composer():
    return NotificationComposer(position='Sales Agent', source_label='Test Landing Page')


@pytest.fixture
def application():
    return JobApplication(
        full_name='Jane Doe',
        email='jane@example.com',
        phone='0700000000',
        education='Diploma',
        experience='Two years',
        cv=Attachment(filename='jane_cv.pdf', content_type='application/pdf', data=b'%PDF'),
    )


def make_inquiry(**overrides):
    fields = dict(
        full_name='John Okello',
        email='john@example.com',
        phone='0772123456',
        insurance_type=InsuranceType.PERSONAL,
    )
    fields.update(overrides)
    return InsuranceInquiry(**fields)


class TestSelectedPlan:

    def test_personal_plan_with_age_category(self):
        inquiry = make_inquiry(personal_plan='Gold', age_category='26-35')
        assert inquiry.selected_plan == 'Gold - Age: 26-35'

    def test_personal_plan_without_age_category(self):
        assert make_inquiry(personal_plan='Silver').selected_plan == 'Silver'

    def test_age_category_ignored_without_personal_plan(self):
        assert make_inquiry(age_category='26-35').selected_plan == ''

    def test_corporate_plan_ignores_other_selectors(self):
        inquiry = make_inquiry(insurance_type=InsuranceType.CORPORATE,
                               corporate_plan='Platinum',
                               personal_plan='Gold',
                               age_category='26-35')
        assert inquiry.selected_plan == 'Platinum'

    def test_sme_plan(self):
        inquiry = make_inquiry(insurance_type=InsuranceType.SME, sme_plan='Starter')
        assert inquiry.selected_plan == 'Starter'


class TestJobApplicationNotification:

    def test_subject_reply_to_and_attachment(self, composer, application):
        notification = composer.compose_job_application(application)

        assert notification.subject == 'New Job Application - Sales Agent: Jane Doe'
        assert notification.reply_to == 'jane@example.com'
        assert notification.attachments == [application.cv]

    def test_body_lists_fields(self, composer, application):
        html = composer.compose_job_application(application).html

        assert 'Jane Doe' in html
        assert 'Two years' in html
        assert 'jane_cv.pdf (attached)' in html
        assert 'Submitted via Test Landing Page' in html

    def test_missing_motivation_defaults(self, composer, application):
        html = composer.compose_job_application(application).html
        assert 'Not provided' in html

    def test_submitted_markup_is_escaped(self, composer, application):
        application.motivation = '<script>alert(1)</script>'

        html = composer.compose_job_application(application).html

        assert '<script>' not in html
        assert '&lt;script&gt;alert(1)&lt;/script&gt;' in html

    def test_subject_is_single_line(self, composer, application):
        application.full_name = 'Jane\r\nBcc: victim@example.com'

        subject = composer.compose_job_application(application).subject

        assert '\n' not in subject and '\r' not in subject
        assert subject.endswith('Jane Bcc: victim@example.com')


class TestInsuranceInquiryNotification:

    def test_personal_plan_with_age_in_body(self, composer):
        inquiry = make_inquiry(personal_plan='Gold', age_category='26-35')

        notification = composer.compose_insurance_inquiry(inquiry)

        assert notification.subject == 'New Insurance Inquiry: John Okello - Personal'
        assert '<strong>Selected Plan:</strong> Gold - Age: 26-35' in notification.html
        assert notification.attachments == []

    def test_defaults_and_contact_links(self, composer):
        html = composer.compose_insurance_inquiry(make_inquiry()).html

        assert 'Number of People:</strong> Not specified' in html
        assert 'href="mailto:john@example.com"' in html
        assert 'href="tel:0772123456"' in html
        assert 'Please respond to this inquiry within 24 hours' in html


def test_single_line_collapses_whitespace():
    assert single_line('  a\n\tb  \r\n c ') == 'a b c'


def test_render_failure_raises_intake_error(composer, application):
    composer._templates['job_application'] = (
        composer.text_env.from_string('{{ undefined_value }}'),
        composer.html_env.from_string('<p></p>'),
    )

    with pytest.raises(TemplateRenderingError) as exc_info:
        composer.compose_job_application(application)

    assert isinstance(exc_info.value, IntakeError)
    assert 'undefined_value' in exc_info.value.detail
    assert 'undefined_value' not in exc_info.value.message

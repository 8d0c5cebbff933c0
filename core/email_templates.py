# core/email_templates.py
"""
Jinja2 layouts for operator notifications
"""

_STYLES = """
        body { font-family: Arial, sans-serif; line-height: 1.6; }
        .header { background: #c41e3a; color: white; padding: 20px; text-align: center; }
        .content { padding: 20px; }
        .field { margin-bottom: 15px; }
        .label { font-weight: bold; color: #c41e3a; }
        .footer { background: #f5f5f5; padding: 15px; text-align: center; font-size: 12px; }
"""

JOB_APPLICATION_SUBJECT = "New Job Application - {{ position }}: {{ application.full_name }}"

JOB_APPLICATION_HTML = """
<html>
<head>
    <style>""" + _STYLES + """    </style>
</head>
<body>
    <div class="header">
        <h2>New Job Application - {{ position }}</h2>
    </div>
    <div class="content">
        <div class="field"><span class="label">Full Name:</span> {{ application.full_name }}</div>
        <div class="field"><span class="label">Email:</span> {{ application.email }}</div>
        <div class="field"><span class="label">Phone:</span> {{ application.phone }}</div>
        <div class="field"><span class="label">Education:</span> {{ application.education }}</div>
        <div class="field"><span class="label">Experience:</span> {{ application.experience }}</div>
        <div class="field"><span class="label">Motivation:</span><br>{{ application.motivation or 'Not provided' }}</div>
        <div class="field"><span class="label">CV:</span> {{ application.cv.filename }} (attached)</div>
    </div>
    <div class="footer">
        Submitted via {{ source_label }}
    </div>
</body>
</html>
"""

INSURANCE_INQUIRY_SUBJECT = (
    "New Insurance Inquiry: {{ inquiry.full_name }} - {{ inquiry.insurance_type.value }}"
)

INSURANCE_INQUIRY_HTML = """
<html>
<head>
    <style>""" + _STYLES + """        .highlight { background: #fff3cd; padding: 15px; border-radius: 5px; margin: 15px 0; }
    </style>
</head>
<body>
    <div class="header">
        <h2>New Insurance Inquiry</h2>
        <p>{{ inquiry.insurance_type.value }} Insurance</p>
    </div>
    <div class="content">
        <div class="highlight">
            <strong>Insurance Category:</strong> {{ inquiry.insurance_type.value }}<br>
            <strong>Selected Plan:</strong> {{ inquiry.selected_plan }}<br>
            <strong>Number of People:</strong> {{ inquiry.number_of_people or 'Not specified' }}
        </div>

        <h3 style="color: #c41e3a;">Contact Information</h3>
        <div class="field"><span class="label">Full Name:</span> {{ inquiry.full_name }}</div>
        <div class="field"><span class="label">Email:</span> <a href="mailto:{{ inquiry.email }}">{{ inquiry.email }}</a></div>
        <div class="field"><span class="label">Phone:</span> <a href="tel:{{ inquiry.phone }}">{{ inquiry.phone }}</a></div>

        <h3 style="color: #c41e3a;">Additional Message</h3>
        <div class="field">{{ inquiry.motivation or 'Not provided' }}</div>
    </div>
    <div class="footer">
        Submitted via {{ source_label }}<br>
        <small>Please respond to this inquiry within 24 hours</small>
    </div>
</body>
</html>
"""

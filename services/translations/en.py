# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.warning": "Warning",

    # Buttons
    "button.start_project": "Start Your Project",
    "button.next": "Next Step",
    "button.back": "Back",
    "button.submit": "Submit",
    "button.submitting": "Submitting...",
    "button.retry": "Retry",

    # Home
    "home.headline": "We build digital products that grow your business",
    "home.tagline": "Websites, mobile apps, brands and marketing under one roof.",

    # Wizard
    "wizard.title": "Start Your Project",
    "wizard.progress": "Step {current} of {total}",

    # Steps
    "step.details.title": "Project Details",
    "step.details.description": "Tell us about your project requirements",
    "step.services.title": "Services Selection",
    "step.services.description": "Choose the services you need",
    "step.budget.title": "Budget & Timeline",
    "step.budget.description": "Define your budget and timeline",

    # Fields
    "field.project_name": "Project Name",
    "field.project_name.placeholder": "Enter your project name",
    "field.description": "Project Description",
    "field.description.placeholder": "Describe your project",
    "field.services": "Select Services",
    "field.budget": "Budget Range",
    "field.budget.placeholder": "Select budget range",
    "field.timeline": "Timeline",
    "field.timeline.placeholder": "Select timeline",

    # Validation Messages
    "validation.field_required": "Field '{field}' is required",
    "validation.select_required": "Please select {field}",
    "validation.services_required": "Please select at least one service",
    "validation.check_data": "Please check the entered data",
    "validation.unknown_step": "Unknown step",

    # Submission
    "success.submitted.title": "Thank You!",
    "success.submitted": "We've received your project details and will get back to you soon.",
    "success.reference": "Reference: {reference}",
    "error.submission.failed": "We couldn't submit your project. Please try again.",
    "error.submission.timeout": "The submission timed out. Please try again.",
    "error.unexpected": "An unexpected error occurred.",
}

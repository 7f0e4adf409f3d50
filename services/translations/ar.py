# -*- coding: utf-8 -*-
"""Arabic translations."""

AR_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "خطأ",
    "dialog.warning": "تحذير",

    # Buttons
    "button.start_project": "ابدأ مشروعك",
    "button.next": "الخطوة التالية",
    "button.back": "السابق",
    "button.submit": "إرسال",
    "button.submitting": "جارٍ الإرسال...",
    "button.retry": "إعادة المحاولة",

    # Home
    "home.headline": "نبني منتجات رقمية تنمّي أعمالك",
    "home.tagline": "مواقع وتطبيقات وهويات وتسويق تحت سقف واحد.",

    # Wizard
    "wizard.title": "ابدأ مشروعك",
    "wizard.progress": "الخطوة {current} من {total}",

    # Steps
    "step.details.title": "تفاصيل المشروع",
    "step.details.description": "أخبرنا عن متطلبات مشروعك",
    "step.services.title": "اختيار الخدمات",
    "step.services.description": "اختر الخدمات التي تحتاجها",
    "step.budget.title": "الميزانية والجدول الزمني",
    "step.budget.description": "حدد ميزانيتك وجدولك الزمني",

    # Fields
    "field.project_name": "اسم المشروع",
    "field.project_name.placeholder": "أدخل اسم مشروعك",
    "field.description": "وصف المشروع",
    "field.description.placeholder": "صف مشروعك",
    "field.services": "اختر الخدمات",
    "field.budget": "نطاق الميزانية",
    "field.budget.placeholder": "اختر نطاق الميزانية",
    "field.timeline": "الجدول الزمني",
    "field.timeline.placeholder": "اختر الجدول الزمني",

    # Validation Messages
    "validation.field_required": "الحقل '{field}' مطلوب",
    "validation.select_required": "يرجى اختيار {field}",
    "validation.services_required": "يرجى اختيار خدمة واحدة على الأقل",
    "validation.check_data": "يرجى التحقق من البيانات المدخلة",
    "validation.unknown_step": "خطوة غير معروفة",

    # Submission
    "success.submitted.title": "شكراً لك!",
    "success.submitted": "استلمنا تفاصيل مشروعك وسنتواصل معك قريباً.",
    "success.reference": "المرجع: {reference}",
    "error.submission.failed": "تعذّر إرسال مشروعك. يرجى المحاولة مرة أخرى.",
    "error.submission.timeout": "انتهت مهلة الإرسال. يرجى المحاولة مرة أخرى.",
    "error.unexpected": "حدث خطأ غير متوقع.",
}

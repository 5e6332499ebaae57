"""
String tables for the English and Arabic interfaces.
"""

from typing import Dict

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        # Navigation
        "nav.home": "AppReferenceHub",
        "nav.admin": "Admin",
        "nav.login": "Admin Login",
        "nav.logout": "Logout",
        "footer.copyright": "© 2024 AppReferenceHub. All rights reserved.",
        "lang.switch": "العربية",
        "lang.current": "Language",

        # Home page
        "home.title": "Application Reference Hub",
        "home.subtitle": "A curated collection of tech tools and applications",
        "app.view": "View Application",

        # Login
        "login.title": "Admin Login",
        "login.email": "Email",
        "login.password": "Password",
        "login.button": "Login",
        "login.error": "Invalid email or password",
        "login.success": "Login successful",
        "login.failed": "Login failed",
        "logout.success": "You have been logged out.",
        "whoami.anonymous": "Not logged in",

        # Admin dashboard
        "admin.title": "Admin Dashboard",
        "admin.subtitle": "Manage your applications",
        "admin.add": "Add New Application",
        "admin.empty": "No applications found",
        "admin.edit": "Edit",
        "admin.delete": "Delete",
        "admin.delete.confirm": "Are you sure you want to delete this application?",
        "admin.delete.cancel": "Cancel",
        "admin.delete.confirm.button": "Delete",
        "admin.delete.aborted": "Deletion cancelled",
        "admin.column.name": "Name",
        "admin.column.created": "Created",
        "admin.column.link": "Link",
        "admin.column.actions": "Actions",
        "admin.visit": "Visit",

        # Application form
        "app.form.add": "Add New Application",
        "app.form.edit": "Edit Application",
        "app.form.name": "Name",
        "app.form.description": "Description",
        "app.form.link": "Link",
        "app.form.image": "Image",
        "app.form.upload": "Upload Image",
        "app.form.uploading": "Uploading...",
        "app.form.clear": "Clear Image",
        "app.form.save": "Save Application",
        "app.form.saving": "Saving...",
        "app.form.back": "Back",
        "app.form.samples": "Sample Images",

        # Notifications
        "toast.created": "Application created",
        "toast.created.description": "The application has been created successfully.",
        "toast.updated": "Application updated",
        "toast.updated.description": "The application has been updated successfully.",
        "toast.deleted": "Application deleted",
        "toast.deleted.description": "The application has been deleted successfully.",
        "toast.notfound": "Application not found",
        "toast.notfound.description": "The application you are trying to edit does not exist.",
        "toast.denied": "Access denied",
        "toast.denied.description": "You must be logged in to access this page.",
        "toast.error": "Error",
        "toast.error.description": "There was an error saving the application.",
    },
    "ar": {
        # Navigation
        "nav.home": "مركز تطبيقات المرجع",
        "nav.admin": "المسؤول",
        "nav.login": "تسجيل دخول المسؤول",
        "nav.logout": "تسجيل الخروج",
        "footer.copyright": "© 2024 مركز تطبيقات المرجع. جميع الحقوق محفوظة.",
        "lang.switch": "English",
        "lang.current": "اللغة",

        # Home page
        "home.title": "مركز مرجع التطبيقات",
        "home.subtitle": "مجموعة منتقاة من الأدوات والتطبيقات التقنية",
        "app.view": "عرض التطبيق",

        # Login
        "login.title": "تسجيل دخول المسؤول",
        "login.email": "البريد الإلكتروني",
        "login.password": "كلمة المرور",
        "login.button": "تسجيل الدخول",
        "login.error": "البريد الإلكتروني أو كلمة المرور غير صالحة",
        "login.success": "تم تسجيل الدخول بنجاح",
        "login.failed": "فشل تسجيل الدخول",
        "logout.success": "تم تسجيل خروجك.",
        "whoami.anonymous": "لم يتم تسجيل الدخول",

        # Admin dashboard
        "admin.title": "لوحة تحكم المسؤول",
        "admin.subtitle": "إدارة تطبيقاتك",
        "admin.add": "إضافة تطبيق جديد",
        "admin.empty": "لم يتم العثور على تطبيقات",
        "admin.edit": "تعديل",
        "admin.delete": "حذف",
        "admin.delete.confirm": "هل أنت متأكد أنك تريد حذف هذا التطبيق؟",
        "admin.delete.cancel": "إلغاء",
        "admin.delete.confirm.button": "حذف",
        "admin.delete.aborted": "تم إلغاء الحذف",
        "admin.column.name": "الاسم",
        "admin.column.created": "تاريخ الإنشاء",
        "admin.column.link": "الرابط",
        "admin.column.actions": "الإجراءات",
        "admin.visit": "زيارة",

        # Application form
        "app.form.add": "إضافة تطبيق جديد",
        "app.form.edit": "تعديل التطبيق",
        "app.form.name": "الاسم",
        "app.form.description": "الوصف",
        "app.form.link": "الرابط",
        "app.form.image": "الصورة",
        "app.form.upload": "تحميل الصورة",
        "app.form.uploading": "جاري التحميل...",
        "app.form.clear": "مسح الصورة",
        "app.form.save": "حفظ التطبيق",
        "app.form.saving": "جاري الحفظ...",
        "app.form.back": "رجوع",
        "app.form.samples": "صور نموذجية",

        # Notifications
        "toast.created": "تم إنشاء التطبيق",
        "toast.created.description": "تم إنشاء التطبيق بنجاح.",
        "toast.updated": "تم تحديث التطبيق",
        "toast.updated.description": "تم تحديث التطبيق بنجاح.",
        "toast.deleted": "تم حذف التطبيق",
        "toast.deleted.description": "تم حذف التطبيق بنجاح.",
        "toast.notfound": "لم يتم العثور على التطبيق",
        "toast.notfound.description": "التطبيق الذي تحاول تعديله غير موجود.",
        "toast.denied": "تم رفض الوصول",
        "toast.denied.description": "يجب تسجيل الدخول للوصول إلى هذه الصفحة.",
        "toast.error": "خطأ",
        "toast.error.description": "حدث خطأ أثناء حفظ التطبيق.",
    },
}

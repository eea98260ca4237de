from __future__ import annotations

"""backend/app/services/diagnostics/error_messages.py

Error taxonomy and the user-facing message table.

Every ErrorKind has exactly one message per supported locale. The trailing
emoji is part of the product copy and must be kept as-is.
"""

from enum import Enum
from typing import Mapping


class ErrorKind(str, Enum):
    # Network
    NO_INTERNET = "NO_INTERNET"
    TIMEOUT = "TIMEOUT"
    SERVER_ERROR = "SERVER_ERROR"

    # Research
    RESEARCH_NO_RESULTS = "RESEARCH_NO_RESULTS"
    RESEARCH_FAILED = "RESEARCH_FAILED"

    # Generation
    HOOK_GENERATION_FAILED = "HOOK_GENERATION_FAILED"
    SCRIPT_GENERATION_FAILED = "SCRIPT_GENERATION_FAILED"

    # Input
    TOPIC_TOO_SHORT = "TOPIC_TOO_SHORT"
    TOPIC_TOO_LONG = "TOPIC_TOO_LONG"
    INVALID_LANGUAGE = "INVALID_LANGUAGE"
    INVALID_DURATION = "INVALID_DURATION"

    # Limits
    DAILY_LIMIT_REACHED = "DAILY_LIMIT_REACHED"
    NO_CREDITS = "NO_CREDITS"

    # API
    API_KEY_INVALID = "API_KEY_INVALID"
    RATE_LIMITED = "RATE_LIMITED"

    UNKNOWN_ERROR = "UNKNOWN_ERROR"


SUPPORTED_LOCALES: tuple[str, ...] = ("ar", "en", "fr")
DEFAULT_LOCALE = "en"

# Kinds that detect_error_type can return. The others are only ever
# assigned explicitly by callers (input validation, quota checks).
DETECTABLE_KINDS: frozenset[ErrorKind] = frozenset(
    {
        ErrorKind.NO_INTERNET,
        ErrorKind.TIMEOUT,
        ErrorKind.RATE_LIMITED,
        ErrorKind.API_KEY_INVALID,
        ErrorKind.SERVER_ERROR,
        ErrorKind.RESEARCH_FAILED,
        ErrorKind.HOOK_GENERATION_FAILED,
        ErrorKind.SCRIPT_GENERATION_FAILED,
        ErrorKind.UNKNOWN_ERROR,
    }
)


ERROR_MESSAGES: Mapping[ErrorKind, Mapping[str, str]] = {
    ErrorKind.NO_INTERNET: {
        "ar": "لا يوجد اتصال بالإنترنت. تأكد من الاتصال وحاول مرة أخرى 📶",
        "en": "No internet connection. Please check your connection and try again 📶",
        "fr": "Pas de connexion Internet. Vérifiez votre connexion et réessayez 📶",
    },
    ErrorKind.TIMEOUT: {
        "ar": "انتهت مهلة الاتصال. الخادم مشغول، حاول مرة أخرى بعد قليل ⏱️",
        "en": "Connection timed out. Server is busy, please try again shortly ⏱️",
        "fr": "Délai de connexion dépassé. Le serveur est occupé, réessayez dans un moment ⏱️",
    },
    ErrorKind.SERVER_ERROR: {
        "ar": "حدث خطأ في الخادم. نعمل على حله، حاول مرة أخرى لاحقاً 🔧",
        "en": "Server error occurred. We're working on it, please try again later 🔧",
        "fr": "Erreur serveur. Nous y travaillons, veuillez réessayer plus tard 🔧",
    },
    ErrorKind.RESEARCH_NO_RESULTS: {
        "ar": "لم نجد معلومات كافية عن هذا الموضوع. جرب صياغة الموضوع بطريقة مختلفة 🔍",
        "en": "Could not find enough information on this topic. Try rephrasing your topic 🔍",
        "fr": "Impossible de trouver assez d'informations. Essayez de reformuler votre sujet 🔍",
    },
    ErrorKind.RESEARCH_FAILED: {
        "ar": "فشل البحث عن المعلومات. حاول مرة أخرى أو اكتب الموضوع بشكل مختلف 🔄",
        "en": "Research failed. Please try again or rephrase your topic 🔄",
        "fr": "La recherche a échoué. Réessayez ou reformulez votre sujet 🔄",
    },
    ErrorKind.HOOK_GENERATION_FAILED: {
        "ar": "لم نتمكن من إنشاء الـ Hooks. حاول مرة أخرى 🎣",
        "en": "Could not generate hooks. Please try again 🎣",
        "fr": "Impossible de générer les hooks. Veuillez réessayer 🎣",
    },
    ErrorKind.SCRIPT_GENERATION_FAILED: {
        "ar": "لم نتمكن من كتابة السكريبت. حاول مرة أخرى 📝",
        "en": "Could not write the script. Please try again 📝",
        "fr": "Impossible d'écrire le script. Veuillez réessayer 📝",
    },
    ErrorKind.TOPIC_TOO_SHORT: {
        "ar": "الموضوع قصير جداً. أضف المزيد من التفاصيل للحصول على نتائج أفضل ✏️",
        "en": "Topic is too short. Add more details for better results ✏️",
        "fr": "Le sujet est trop court. Ajoutez plus de détails pour de meilleurs résultats ✏️",
    },
    ErrorKind.TOPIC_TOO_LONG: {
        "ar": "الموضوع طويل جداً. حاول اختصاره قليلاً 📏",
        "en": "Topic is too long. Try to shorten it a bit 📏",
        "fr": "Le sujet est trop long. Essayez de le raccourcir un peu 📏",
    },
    ErrorKind.INVALID_LANGUAGE: {
        "ar": "اللغة المختارة غير مدعومة حالياً 🌐",
        "en": "Selected language is not currently supported 🌐",
        "fr": "La langue sélectionnée n'est pas prise en charge actuellement 🌐",
    },
    ErrorKind.INVALID_DURATION: {
        "ar": "مدة الفيديو غير صحيحة. اختر 30 أو 60 ثانية ⏰",
        "en": "Invalid video duration. Please select 30 or 60 seconds ⏰",
        "fr": "Durée de vidéo invalide. Veuillez sélectionner 30 ou 60 secondes ⏰",
    },
    ErrorKind.DAILY_LIMIT_REACHED: {
        "ar": "وصلت للحد اليومي. عد غداً أو قم بالترقية للمزيد ⭐",
        "en": "Daily limit reached. Come back tomorrow or upgrade for more ⭐",
        "fr": "Limite quotidienne atteinte. Revenez demain ou passez à la version supérieure ⭐",
    },
    ErrorKind.NO_CREDITS: {
        "ar": "لا يوجد رصيد كافٍ. قم بالترقية للاستمرار 💳",
        "en": "Not enough credits. Please upgrade to continue 💳",
        "fr": "Pas assez de crédits. Veuillez passer à la version supérieure pour continuer 💳",
    },
    ErrorKind.API_KEY_INVALID: {
        "ar": "حدث خطأ في المصادقة. حاول تسجيل الخروج والدخول مجدداً 🔑",
        "en": "Authentication error. Try logging out and back in 🔑",
        "fr": "Erreur d'authentification. Essayez de vous déconnecter et reconnecter 🔑",
    },
    ErrorKind.RATE_LIMITED: {
        "ar": "طلبات كثيرة! انتظر قليلاً ثم حاول مرة أخرى 🐢",
        "en": "Too many requests! Please wait a moment and try again 🐢",
        "fr": "Trop de requêtes! Veuillez patienter un moment et réessayer 🐢",
    },
    ErrorKind.UNKNOWN_ERROR: {
        "ar": "حدث خطأ غير متوقع. حاول مرة أخرى 😅",
        "en": "An unexpected error occurred. Please try again 😅",
        "fr": "Une erreur inattendue s'est produite. Veuillez réessayer 😅",
    },
}

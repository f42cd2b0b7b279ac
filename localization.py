from pydantic_models import Language

LANGUAGE_OPTIONS = [
    (Language.EN, "English"),
    (Language.HI, "हिंदी"),
    (Language.MR, "मराठी"),
]


UI_STRINGS = {
    Language.EN: {
        "title": "Aapla Doctor",
        "tagline": "Your health companion, in your language",
        "searchPlaceholder": "Search for a medicine, e.g. Paracetamol",
        "searchBtn": "Search",
        "medicineFinder": "Medicine Finder",
        "symptomChecker": "Symptom Checker",
        "nearbyFacilities": "Nearby Hospitals & Pharmacies",
        "wellnessTips": "Daily Wellness Tips",
        "consultDoctor": "Consult a Doctor",
        "backToHome": "Back to Home",
        "contactUs": "Contact Us",
        "privacyPolicy": "Privacy Policy",
        "footerCopyright": "© 2025 Aapla Doctor. All rights reserved.",
        "disclaimerTitle": "Medical Disclaimer",
        "disclaimerText": (
            "This app provides AI-generated information for general awareness only. "
            "It is not a substitute for professional medical advice, diagnosis or treatment. "
            "In an emergency, call 108 immediately."
        ),
        "accept": "I Understand and Accept",
        "medicineSearchLabel": "Enter medicine name",
        "medicineSearchBtn": "Find Info",
        "usageLabel": "Usage",
        "dosageLabel": "Dosage",
        "warningLabel": "Warning",
        "symptomSearchLabel": "Describe the symptoms or emergency",
        "symptomSearchBtn": "Get First Aid Advice",
        "firstAidLabel": "First Aid Steps",
        "otcLabel": "Over-the-counter Suggestions",
        "nearbyBtn": "Find Nearby",
        "medicineError": "Could not find medicine details.",
        "locationDenied": "Location access denied.",
        "locationPrompt": "Press the location button below and allow access to search near you.",
        "nearbyFeature": "Find 24/7 pharmacies and specialist hospitals near you in seconds.",
        "wellnessFeature": "Daily diet, yoga, and seasonal wellness tips curated for your lifestyle.",
        "consultFeature": "Book an instant online consultation with certified doctors anytime.",
        "recentQueries": "Recent Queries",
        "noHistory": "No history yet.",
    },
    Language.HI: {
        "title": "आपला डॉक्टर",
        "tagline": "आपकी भाषा में, आपका स्वास्थ्य साथी",
        "searchPlaceholder": "दवा खोजें, जैसे पैरासिटामोल",
        "searchBtn": "खोजें",
        "medicineFinder": "दवा खोजक",
        "symptomChecker": "लक्षण जांचक",
        "nearbyFacilities": "नज़दीकी अस्पताल और फार्मेसी",
        "wellnessTips": "दैनिक स्वास्थ्य सुझाव",
        "consultDoctor": "डॉक्टर से परामर्श",
        "backToHome": "होम पर वापस जाएं",
        "contactUs": "संपर्क करें",
        "privacyPolicy": "गोपनीयता नीति",
        "footerCopyright": "© 2025 आपला डॉक्टर। सर्वाधिकार सुरक्षित।",
        "disclaimerTitle": "चिकित्सा अस्वीकरण",
        "disclaimerText": (
            "यह ऐप केवल सामान्य जानकारी के लिए AI द्वारा तैयार जानकारी देता है। "
            "यह पेशेवर चिकित्सा सलाह, निदान या उपचार का विकल्प नहीं है। "
            "आपात स्थिति में तुरंत 108 पर कॉल करें।"
        ),
        "accept": "मैं समझता हूं और स्वीकार करता हूं",
        "medicineSearchLabel": "दवा का नाम दर्ज करें",
        "medicineSearchBtn": "जानकारी पाएं",
        "usageLabel": "उपयोग",
        "dosageLabel": "खुराक",
        "warningLabel": "चेतावनी",
        "symptomSearchLabel": "लक्षण या आपात स्थिति का वर्णन करें",
        "symptomSearchBtn": "प्राथमिक उपचार सलाह पाएं",
        "firstAidLabel": "प्राथमिक उपचार के चरण",
        "otcLabel": "बिना पर्चे की दवाओं के सुझाव",
        "nearbyBtn": "नज़दीकी खोजें",
        "medicineError": "दवा का विवरण नहीं मिल सका।",
        "locationDenied": "स्थान की पहुंच अस्वीकृत।",
        "locationPrompt": "नीचे दिए गए स्थान बटन को दबाएं और अपने पास खोजने के लिए अनुमति दें।",
        "nearbyFeature": "कुछ ही सेकंड में अपने पास 24/7 फार्मेसी और विशेषज्ञ अस्पताल खोजें।",
        "wellnessFeature": "आपकी जीवनशैली के लिए दैनिक आहार, योग और मौसमी स्वास्थ्य सुझाव।",
        "consultFeature": "कभी भी प्रमाणित डॉक्टरों से तुरंत ऑनलाइन परामर्श बुक करें।",
        "recentQueries": "हाल की खोजें",
        "noHistory": "अभी कोई इतिहास नहीं।",
    },
    Language.MR: {
        "title": "आपला डॉक्टर",
        "tagline": "तुमच्या भाषेत, तुमचा आरोग्य साथी",
        "searchPlaceholder": "औषध शोधा, उदा. पॅरासिटामॉल",
        "searchBtn": "शोधा",
        "medicineFinder": "औषध शोधक",
        "symptomChecker": "लक्षण तपासणी",
        "nearbyFacilities": "जवळची रुग्णालये आणि फार्मसी",
        "wellnessTips": "दैनंदिन आरोग्य टिप्स",
        "consultDoctor": "डॉक्टरांचा सल्ला घ्या",
        "backToHome": "मुख्यपृष्ठावर परत जा",
        "contactUs": "संपर्क साधा",
        "privacyPolicy": "गोपनीयता धोरण",
        "footerCopyright": "© 2025 आपला डॉक्टर. सर्व हक्क राखीव.",
        "disclaimerTitle": "वैद्यकीय अस्वीकरण",
        "disclaimerText": (
            "हे ॲप केवळ सामान्य माहितीसाठी AI द्वारे तयार केलेली माहिती देते. "
            "हे व्यावसायिक वैद्यकीय सल्ला, निदान किंवा उपचाराचा पर्याय नाही. "
            "आणीबाणीच्या वेळी त्वरित 108 वर कॉल करा."
        ),
        "accept": "मला समजले आणि मी स्वीकारतो",
        "medicineSearchLabel": "औषधाचे नाव टाका",
        "medicineSearchBtn": "माहिती मिळवा",
        "usageLabel": "उपयोग",
        "dosageLabel": "डोस",
        "warningLabel": "इशारा",
        "symptomSearchLabel": "लक्षणे किंवा आणीबाणीचे वर्णन करा",
        "symptomSearchBtn": "प्रथमोपचार सल्ला मिळवा",
        "firstAidLabel": "प्रथमोपचाराच्या पायऱ्या",
        "otcLabel": "विनाप्रिस्क्रिप्शन औषधांच्या सूचना",
        "nearbyBtn": "जवळपास शोधा",
        "medicineError": "औषधाची माहिती मिळू शकली नाही.",
        "locationDenied": "स्थान प्रवेश नाकारला.",
        "locationPrompt": "जवळपास शोधण्यासाठी खालील स्थान बटण दाबा आणि परवानगी द्या.",
        "nearbyFeature": "काही सेकंदात तुमच्या जवळील 24/7 फार्मसी आणि तज्ञ रुग्णालये शोधा.",
        "wellnessFeature": "तुमच्या जीवनशैलीसाठी दैनंदिन आहार, योग आणि ऋतूनुसार आरोग्य टिप्स.",
        "consultFeature": "कधीही प्रमाणित डॉक्टरांशी त्वरित ऑनलाइन सल्लामसलत बुक करा.",
        "recentQueries": "अलीकडील शोध",
        "noHistory": "अद्याप इतिहास नाही.",
    },
}


def strings(lang) -> dict:
    return UI_STRINGS[Language(lang)]

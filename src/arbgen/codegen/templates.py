"""Fixed Dart source fragments of the generated i18n unit.

Only the fragments that do not depend on resource content live here; the
emitter interleaves them with the generated accessors, locale classes and
delegate entries.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "DELEGATE_CLASS_END",
    "DELEGATE_CLASS_HEADER",
    "DELEGATE_CLASS_RESOLUTION",
    "I18N_FILE_IMPORTS",
    "S_CLASS_HEADER",
]

I18N_FILE_IMPORTS: str = (
    "import 'dart:async';\n"
    "\n"
    "import 'package:flutter/foundation.dart';\n"
    "import 'package:flutter/material.dart';\n"
    "\n"
)

# Base class up to and including its text direction; accessors follow.
S_CLASS_HEADER: str = (
    "class S extends WidgetsLocalizations {\n"
    "  Locale _locale;\n"
    "  String _lang;\n"
    "\n"
    "  S(this._locale) {\n"
    "    _lang = getLang(_locale);\n"
    "    print('Current locale: $_lang');\n"
    "  }\n"
    "\n"
    "  static final GeneratedLocalizationsDelegate delegate =\n"
    "      new GeneratedLocalizationsDelegate();\n"
    "\n"
    "  static S of(BuildContext context) {\n"
    "    var s = Localizations.of<S>(context, WidgetsLocalizations);\n"
    "    s._lang = getLang(s._locale);\n"
    "    return s;\n"
    "  }\n"
    "\n"
    "  @override\n"
    "  TextDirection get textDirection => TextDirection.ltr;\n"
    "\n"
)

# Delegate class up to the opening of the supported locales list.
DELEGATE_CLASS_HEADER: str = (
    "class GeneratedLocalizationsDelegate extends LocalizationsDelegate<WidgetsLocalizations> {\n"
    "  const GeneratedLocalizationsDelegate();\n"
    "\n"
    "  List<Locale> get supportedLocales {\n"
    "    return [\n"
)

# Closes the supported locales list, resolves exact -> language-only ->
# fallback/first, and opens the switch of load().
DELEGATE_CLASS_RESOLUTION: str = (
    "    ];\n"
    "  }\n"
    "\n"
    "  LocaleResolutionCallback resolution({Locale fallback}) {\n"
    "    return (Locale locale, Iterable<Locale> supported) {\n"
    '      var languageLocale = new Locale(locale.languageCode, "");\n'
    "      if (supported.contains(locale))\n"
    "        return locale;\n"
    "      else if (supported.contains(languageLocale))\n"
    "        return languageLocale;\n"
    "      else {\n"
    "        var fallbackLocale = fallback ?? supported.first;\n"
    "        return fallbackLocale;\n"
    "      }\n"
    "    };\n"
    "  }\n"
    "\n"
    "  Future<WidgetsLocalizations> load(Locale locale) {\n"
    "    String lang = getLang(locale);\n"
    "    switch (lang) {\n"
)

DELEGATE_CLASS_END: str = (
    "      default:\n"
    "        return new SynchronousFuture<WidgetsLocalizations>(new S(locale));\n"
    "    }\n"
    "  }\n"
    "\n"
    "  bool isSupported(Locale locale) => supportedLocales.contains(locale);\n"
    "\n"
    "  bool shouldReload(GeneratedLocalizationsDelegate old) => false;\n"
    "}\n"
    "\n"
    "String getLang(Locale l) => l.countryCode != null && l.countryCode.isEmpty\n"
    "    ? l.languageCode\n"
    "    : l.toString();\n"
)

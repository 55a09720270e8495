"""Odoo web controller paths, relative to the configured host."""

AUTHENTICATE = "/web/session/authenticate"

DATABASE_LIST = "/web/database/get_list"
DATABASE_CREATE = "/web/database/create"
DATABASE_DUPLICATE = "/web/database/duplicate"
DATABASE_DROP = "/web/database/drop"

SESSION_INFO = "/web/session/get_session_info"
SESSION_CHANGE_PASSWORD = "/web/session/change_password"
SESSION_LANGUAGES = "/web/session/get_lang_list"
SESSION_MODULES = "/web/session/modules"

SEARCH_READ = "/web/dataset/search_read"
CALL_KW = "/web/dataset/call_kw"

JSON_MIME = "application/json"
TEXT_PLAIN_MIME = "text/plain"

AUTHORIZATION_HEADER = "Authorization"
ACCEPT_LANGUAGE_HEADER = "Accept-Language"
TENANT_KEY_HEADER = "X-Tenant-Id"
API_VERSION_HEADER = "X-Api-Version"
SERVER_HEADER = "Server"

COOKIE = "Cookie"
SESSION_COOKIE = "session"

# request.state attributes populated from a verified JWT
JWT_SUBJECT_ATTR = "jwt_subject"
JWT_CLAIM_ID_ATTR = "jwt_claim_id"
JWT_CLAIM_EMAIL_ATTR = "jwt_claim_email"

# JWT claim name -> request.state attribute
JWT_CLAIM_ATTRS = {
    "sub": JWT_SUBJECT_ATTR,
    "id": JWT_CLAIM_ID_ATTR,
    "email": JWT_CLAIM_EMAIL_ATTR,
}

OVERVIEW_PATH = "/overview"

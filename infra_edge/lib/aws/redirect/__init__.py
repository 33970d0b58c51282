from .https_redirect import HttpsRedirect, redirect_function_code

# Supabase Auth
# Sign-in, sign-up and password reset happen in the client against Supabase Auth
# directly. This backend only verifies the bearer token the client sends.

"""
Supabase Auth provides:
- auth.get_user(jwt) - Resolve the user behind an access token

The resolved user id is the key of user_profile and user_role rows.
"""

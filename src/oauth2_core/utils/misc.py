def secret_2_safe_str(secret: str | None) -> str | None:
    """To securely log secrets"""

    if secret is None:
        return secret

    if len(secret) < 5:
        return "*" * len(secret)

    if len(secret) < 7:
        return secret[:1] + "***" + secret[-1:]

    if len(secret) < 9:
        return secret[:2] + "***" + secret[-2:]

    return secret[:3] + "***" + secret[-3:]

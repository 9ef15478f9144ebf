from restaurant_api.api.qrcodes.models.model_qr_code import QRCodeModel

__all__ = ["QRCodeModel"]

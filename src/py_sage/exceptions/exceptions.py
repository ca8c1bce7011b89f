class MetadataParseError(Exception):
    """
    Off-chain metadata blob is not a valid CHIP-0007 document
    """

    def __init__(self, message: str, errors: list = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or list()


class ChannelClosedError(Exception):
    """
    The other end of a channel is gone, nothing will be delivered
    """

    pass


class RelayStateError(Exception):
    pass


class AntiCounterfeitError(Exception):
    pass


class NoNfcDeviceError(AntiCounterfeitError):
    """
    No compatible NFC reader is connected
    """

    def __init__(self, message: str = "No NFC device found"):
        super().__init__(message)


class NfcDeviceNotSupportedError(AntiCounterfeitError):
    """
    A reader is connected but can't be used for verification
    """

    def __init__(self, message: str = "NFC device not supported"):
        super().__init__(message)

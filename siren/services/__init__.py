from .codec import decode, decode_value, encode, to_dict

# drivers/constants.py

CDL_CLASS_CHOICES = [
    ("A", "Class A"),
    ("B", "Class B"),
    ("C", "Class C"),
]

ENDORSEMENT_CHOICES = [
    ("H", "H - Hazardous materials"),
    ("N", "N - Tank vehicle"),
    ("P", "P - Passenger"),
    ("S", "S - School bus"),
    ("T", "T - Double/triple trailers"),
    ("X", "X - Tank + hazardous materials"),
]

# 表单动作（POST 的 action 字段）
ACTION_SELECT_FILE = "select_file"
ACTION_REMOVE_PENDING = "remove_pending"
ACTION_CONFIRM_ATTACHMENT = "confirm_attachment"
ACTION_REMOVE_ATTACHMENT = "remove_attachment"
ACTION_SELECT_PHOTO = "select_photo"
ACTION_REMOVE_PHOTO = "remove_photo"
ACTION_CANCEL = "cancel"
ACTION_SUBMIT = "submit"

BYTES_PER_MB = 1024 * 1024

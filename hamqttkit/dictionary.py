"""Names used in Home Assistant MQTT discovery payloads and topics."""

from enum import StrEnum


class Component(StrEnum):
    """Home Assistant component names used in discovery topics."""

    BINARY_SENSOR = "binary_sensor"
    BUTTON = "button"
    CAMERA = "camera"
    COVER = "cover"
    DEVICE_TRACKER = "device_tracker"
    DEVICE_AUTOMATION = "device_automation"
    LOCK = "lock"
    NUMBER = "number"
    SELECT = "select"
    SENSOR = "sensor"
    SWITCH = "switch"
    TAG = "tag"
    SCENE = "scene"
    FAN = "fan"
    LIGHT = "light"
    CLIMATE = "climate"


class Property(StrEnum):
    """Abbreviated property keys of discovery payloads."""

    DEVICE_IDENTIFIERS = "ids"
    DEVICE_MANUFACTURER = "mf"
    DEVICE_MODEL = "mdl"
    DEVICE_SOFTWARE_VERSION = "sw"
    DEVICE_CONFIGURATION_URL = "cu"
    NAME = "name"
    UNIQUE_ID = "uniq_id"
    OBJECT_ID = "obj_id"
    DEVICE = "dev"
    DEVICE_CLASS = "dev_cla"
    STATE_CLASS = "stat_cla"
    ICON = "ic"
    RETAIN = "ret"
    SOURCE_TYPE = "src_type"
    ENCODING = "e"
    OPTIMISTIC = "opt"
    AUTOMATION_TYPE = "atype"
    TYPE = "type"
    SUBTYPE = "stype"
    FORCE_UPDATE = "frc_upd"
    UNIT_OF_MEASUREMENT = "unit_of_meas"
    VALUE_TEMPLATE = "val_tpl"
    OPTIONS = "options"
    MIN = "min"
    MAX = "max"
    STEP = "step"
    MODE = "mode"
    COMMAND_TEMPLATE = "cmd_tpl"
    SPEED_RANGE_MAX = "spd_rng_max"
    SPEED_RANGE_MIN = "spd_rng_min"
    BRIGHTNESS_SCALE = "bri_scl"
    MIN_MIREDS = "min_mirs"
    MAX_MIREDS = "max_mirs"
    TEMPERATURE_UNIT = "temp_unit"
    MIN_TEMP = "min_temp"
    MAX_TEMP = "max_temp"
    TEMP_STEP = "temp_step"
    FAN_MODES = "fan_modes"
    SWING_MODES = "swing_modes"
    MODES = "modes"
    TEMPERATURE_COMMAND_TEMPLATE = "temp_cmd_tpl"
    PAYLOAD_ON = "pl_on"
    EXPIRE_AFTER = "exp_aft"


class Topic(StrEnum):
    """Abbreviated topic keys and topic suffixes."""

    CONFIG = "config"
    AVAILABILITY = "avty_t"
    TOPIC = "t"
    STATE = "stat_t"
    COMMAND = "cmd_t"
    POSITION = "pos_t"
    PERCENTAGE_STATE = "pct_stat_t"
    PERCENTAGE_COMMAND = "pct_cmd_t"
    BRIGHTNESS_COMMAND = "bri_cmd_t"
    BRIGHTNESS_STATE = "bri_stat_t"
    COLOR_TEMPERATURE_COMMAND = "clr_temp_cmd_t"
    COLOR_TEMPERATURE_STATE = "clr_temp_stat_t"
    CURRENT_TEMPERATURE = "curr_temp_t"
    ACTION = "act_t"
    AUX_COMMAND = "aux_cmd_t"
    AUX_STATE = "aux_stat_t"
    POWER_COMMAND = "pow_cmd_t"
    FAN_MODE_COMMAND = "fan_mode_cmd_t"
    FAN_MODE_STATE = "fan_mode_stat_t"
    SWING_MODE_COMMAND = "swing_mode_cmd_t"
    SWING_MODE_STATE = "swing_mode_stat_t"
    MODE_COMMAND = "mode_cmd_t"
    MODE_STATE = "mode_stat_t"
    TEMPERATURE_COMMAND = "temp_cmd_t"
    TEMPERATURE_STATE = "temp_stat_t"
    RGB_COMMAND = "rgb_cmd_t"
    RGB_STATE = "rgb_stat_t"
    JSON_ATTRIBUTES = "json_attr_t"
    WHITE_COMMAND = "whit_cmd_t"
    WHITE_STATE = "whit_stat_t"


# JSON and topic decorators
SLASH = "/"
JSON_DATA_PREFIX = "{"
JSON_DATA_SUFFIX = "}"
JSON_PROPERTY_PREFIX = '"'
JSON_PROPERTY_SUFFIX = '":'
JSON_ESCAPE_CHAR = '"'
JSON_PROPERTIES_SEPARATOR = ","
JSON_ARRAY_PREFIX = "["
JSON_ARRAY_SUFFIX = "]"
UNDERSCORE = "_"

# misc
ONLINE = "online"
OFFLINE = "offline"
STATE_ON = "ON"
STATE_OFF = "OFF"
STATE_LOCKED = "LOCKED"
STATE_UNLOCKED = "UNLOCKED"
STATE_NONE = "None"
TRUE = "true"
FALSE = "false"
HOME = "home"
NOT_HOME = "not_home"
TRIGGER = "trigger"
MODE_BOX = "box"
MODE_SLIDER = "slider"

# cover states
CLOSED_STATE = "closed"
CLOSING_STATE = "closing"
OPEN_STATE = "open"
OPENING_STATE = "opening"
STOPPED_STATE = "stopped"

# commands
OPEN_COMMAND = "OPEN"
CLOSE_COMMAND = "CLOSE"
STOP_COMMAND = "STOP"
LOCK_COMMAND = "LOCK"
UNLOCK_COMMAND = "UNLOCK"

# device tracker source types
GPS_TYPE = "gps"
ROUTER_TYPE = "router"
BLUETOOTH_TYPE = "bluetooth"
BLUETOOTH_LE_TYPE = "bluetooth_le"

# camera
ENCODING_BASE64 = "b64"

# device trigger types and subtypes
BUTTON_SHORT_PRESS_TYPE = "button_short_press"
BUTTON_SHORT_RELEASE_TYPE = "button_short_release"
BUTTON_LONG_PRESS_TYPE = "button_long_press"
BUTTON_LONG_RELEASE_TYPE = "button_long_release"
BUTTON_DOUBLE_PRESS_TYPE = "button_double_press"
BUTTON_TRIPLE_PRESS_TYPE = "button_triple_press"
BUTTON_QUADRUPLE_PRESS_TYPE = "button_quadruple_press"
BUTTON_QUINTUPLE_PRESS_TYPE = "button_quintuple_press"
TURN_ON_SUBTYPE = "turn_on"
TURN_OFF_SUBTYPE = "turn_off"
BUTTON_1_SUBTYPE = "button_1"
BUTTON_2_SUBTYPE = "button_2"
BUTTON_3_SUBTYPE = "button_3"
BUTTON_4_SUBTYPE = "button_4"
BUTTON_5_SUBTYPE = "button_5"
BUTTON_6_SUBTYPE = "button_6"

# HVAC actions
ACTION_OFF = "off"
ACTION_HEATING = "heating"
ACTION_COOLING = "cooling"
ACTION_DRYING = "drying"
ACTION_IDLE = "idle"
ACTION_FAN = "fan"

# fan modes
FAN_MODE_AUTO = "auto"
FAN_MODE_LOW = "low"
FAN_MODE_MEDIUM = "medium"
FAN_MODE_HIGH = "high"

# swing modes
SWING_MODE_ON = "on"
SWING_MODE_OFF = "off"

# HVAC modes
MODE_AUTO = "auto"
MODE_OFF = "off"
MODE_COOL = "cool"
MODE_HEAT = "heat"
MODE_DRY = "dry"
MODE_FAN_ONLY = "fan_only"

# other
HEX_MAP = "0123456789abcdef"

# value templates
VALUE_TEMPLATE_FLOAT_P1 = "{{int(float(value)*10**1)}}"
VALUE_TEMPLATE_FLOAT_P2 = "{{int(float(value)*10**2)}}"
VALUE_TEMPLATE_FLOAT_P3 = "{{int(float(value)*10**3)}}"
TEMPERATURE_UNIT_C = "C"
TEMPERATURE_UNIT_F = "F"
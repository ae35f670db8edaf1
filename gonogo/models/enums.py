from enum import Enum


class ApartmentStandard(str, Enum):
    LOW = "baixo"
    MEDIUM = "medio"
    HIGH = "alto"


class ProjectPhase(str, Enum):
    PRE_LAUNCH = "Pré-lançamento"
    LAUNCH = "Lançamento"
    CONSTRUCTION = "Obra"
    POST_CONSTRUCTION = "Pós-obra"


class TypologyTag(str, Enum):
    RESIDENTIAL = "Residencial"
    MIXED = "Misto"
    HIGH_END = "Alto Padrão"
    ECONOMY = "Econômico"


class PackageType(str, Enum):
    FULL = "completo"
    PARTIAL = "parcial"
    SINGLE_SERVICE = "unitario"


class CommissionType(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


class CommunicationTier(str, Enum):
    NONE = "none"
    BASIC = "basic"
    STANDARD = "standard"
    PREMIUM = "premium"


class InstallationType(str, Enum):
    SPLIT_AC = "Ar-condicionado (split)"
    CEILING_FAN = "Ventilador de teto"
    WALLPAPER = "Papel de parede"
    DIGITAL_LOCK = "Fechadura digital"
    COOKTOP = "Cooktop"
    OVEN = "Forno"
    RANGE_HOOD = "Coifa"
    SHOWER = "Chuveiro"
    LIGHT_FIXTURE = "Lustre / luminária"


class Decision(str, Enum):
    AUTOMATIC_NO_GO = "AUTOMATIC_NO_GO"
    GO = "GO"
    GO_WITH_CONDITIONS = "GO_WITH_CONDITIONS"
    NO_GO = "NO_GO"


class GateSeverity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"


class BottleneckSeverity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    SUCCESS = "success"


class ActionPriority(str, Enum):
    HIGH = "Alta"
    MEDIUM = "Média"
    LOW = "Baixa"

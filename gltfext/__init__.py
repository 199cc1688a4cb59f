"""gltfext: typed codecs for glTF 2.0 extensions and a registry to dispatch them."""

__version__ = "1.0.0"

from gltfext.codec import box, elide, sanitize, unbox
from gltfext.errors import (
    ExtensionError,
    ExtensionParseError,
    ExtensionValidationError,
    UnknownExtensionError,
)
from gltfext.extensions import (
    BUILTIN_EXTENSIONS,
    AgiArticulations,
    AgiArticulationsRoot,
    AgiStkMetadata,
    AgiStkMetadataRoot,
    Bim4dMetadata,
    BimData,
    BimDataRoot,
    DracoMeshCompression,
    ExtensionModel,
    GaussianSplatting,
    GeometryMetadata,
    InstanceFeatures,
    MaterialsAnisotropy,
    MaterialsClearcoat,
    MaterialsEmissiveStrength,
    MaterialsIOR,
    MaterialsIridescence,
    MaterialsSheen,
    MaterialsSpecular,
    MaterialsTransmission,
    MaterialsVolume,
    MeshFeatures,
    MeshGpuInstancing,
    MeshoptCompression,
    MeshQuantization,
    PBRSpecularGlossiness,
    PrimitiveOutline,
    PrimitiveStructuralMetadata,
    SceneBounds,
    StructuralMetadata,
    TextureBasisu,
    TextureInfo,
    TextureWebp,
)
from gltfext.host import DecodedExtensions, decode_extensions, encode_extensions
from gltfext.registry import (
    ExtensionRegistry,
    ParentKind,
    decode,
    default_registry,
    lookup,
    register,
)

default_registry.auto_discover()

__all__ = [
    "__version__",
    # Codec primitives
    "box",
    "elide",
    "sanitize",
    "unbox",
    # Errors
    "ExtensionError",
    "ExtensionParseError",
    "ExtensionValidationError",
    "UnknownExtensionError",
    # Registry
    "ExtensionRegistry",
    "ParentKind",
    "decode",
    "default_registry",
    "lookup",
    "register",
    # Host adapter
    "DecodedExtensions",
    "decode_extensions",
    "encode_extensions",
    # Extension types
    "BUILTIN_EXTENSIONS",
    "AgiArticulations",
    "AgiArticulationsRoot",
    "AgiStkMetadata",
    "AgiStkMetadataRoot",
    "Bim4dMetadata",
    "BimData",
    "BimDataRoot",
    "DracoMeshCompression",
    "ExtensionModel",
    "GaussianSplatting",
    "GeometryMetadata",
    "InstanceFeatures",
    "MaterialsAnisotropy",
    "MaterialsClearcoat",
    "MaterialsEmissiveStrength",
    "MaterialsIOR",
    "MaterialsIridescence",
    "MaterialsSheen",
    "MaterialsSpecular",
    "MaterialsTransmission",
    "MaterialsVolume",
    "MeshFeatures",
    "MeshGpuInstancing",
    "MeshoptCompression",
    "MeshQuantization",
    "PBRSpecularGlossiness",
    "PrimitiveOutline",
    "PrimitiveStructuralMetadata",
    "SceneBounds",
    "StructuralMetadata",
    "TextureBasisu",
    "TextureInfo",
    "TextureWebp",
]

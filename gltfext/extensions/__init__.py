"""Built-in extension types.

:data:`BUILTIN_EXTENSIONS` is the registration order used by
:meth:`ExtensionRegistry.auto_discover`.  Extensions that carry a different
payload on the document root (``GRIFFEL_bim_data``, ``AGI_articulations``,
``AGI_stk_metadata``, ``EXT_structural_metadata``) list the other owner
first and the root second, so a lookup by name alone resolves to the root
payload.
"""

from gltfext.extensions.agi import (
    AgiArticulations,
    AgiArticulationsRoot,
    AgiStkMetadata,
    AgiStkMetadataRoot,
    Articulation,
    ArticulationStage,
    SolarPanelGroup,
    StageType,
)
from gltfext.extensions.anisotropy import MaterialsAnisotropy
from gltfext.extensions.base import (
    ExtensionModel,
    GltfProperty,
    JsonModel,
    NormalTextureInfo,
    TextureInfo,
    defaulted,
)
from gltfext.extensions.bim4d import Bim4dMetadata, WorkItem, validate_work_item
from gltfext.extensions.bim_data import (
    BimData,
    BimDataRoot,
    BimProperty,
    BimType,
    NodePropertyMapping,
)
from gltfext.extensions.cesium_outline import PrimitiveOutline
from gltfext.extensions.clearcoat import MaterialsClearcoat
from gltfext.extensions.compression import (
    DracoMeshCompression,
    MeshoptCompression,
    MeshoptFilter,
    MeshoptMode,
    MeshQuantization,
)
from gltfext.extensions.emissive_strength import MaterialsEmissiveStrength
from gltfext.extensions.geometry_metadata import GeometryMetadata, SceneBounds
from gltfext.extensions.instancing import (
    InstanceFeatureID,
    InstanceFeatures,
    MeshGpuInstancing,
)
from gltfext.extensions.ior import MaterialsIOR
from gltfext.extensions.iridescence import MaterialsIridescence
from gltfext.extensions.mesh_features import (
    FeatureID,
    FeatureIDTexture,
    MeshFeatures,
    is_default_channels,
    validate_feature_id,
)
from gltfext.extensions.sheen import MaterialsSheen
from gltfext.extensions.specular import MaterialsSpecular, PBRSpecularGlossiness
from gltfext.extensions.splatting import GaussianSplatting
from gltfext.extensions.structural_metadata import (
    PrimitiveStructuralMetadata,
    Schema,
    StructuralMetadata,
)
from gltfext.extensions.textures import TextureBasisu, TextureWebp
from gltfext.extensions.transmission import MaterialsTransmission
from gltfext.extensions.volume import MaterialsVolume

BUILTIN_EXTENSIONS: tuple[type[ExtensionModel], ...] = (
    # Materials
    MaterialsIOR,
    MaterialsEmissiveStrength,
    MaterialsAnisotropy,
    MaterialsClearcoat,
    MaterialsSheen,
    MaterialsTransmission,
    MaterialsVolume,
    MaterialsSpecular,
    MaterialsIridescence,
    PBRSpecularGlossiness,
    # Textures
    TextureWebp,
    TextureBasisu,
    # Scene, node, document
    GeometryMetadata,
    BimData,
    BimDataRoot,
    AgiArticulations,
    AgiArticulationsRoot,
    AgiStkMetadata,
    AgiStkMetadataRoot,
    Bim4dMetadata,
    MeshGpuInstancing,
    InstanceFeatures,
    MeshQuantization,
    # Mesh primitive
    MeshFeatures,
    DracoMeshCompression,
    GaussianSplatting,
    PrimitiveOutline,
    PrimitiveStructuralMetadata,
    StructuralMetadata,
    # Buffer view
    MeshoptCompression,
)

__all__ = [
    "BUILTIN_EXTENSIONS",
    "AgiArticulations",
    "AgiArticulationsRoot",
    "AgiStkMetadata",
    "AgiStkMetadataRoot",
    "Articulation",
    "ArticulationStage",
    "Bim4dMetadata",
    "BimData",
    "BimDataRoot",
    "BimProperty",
    "BimType",
    "DracoMeshCompression",
    "ExtensionModel",
    "FeatureID",
    "FeatureIDTexture",
    "GaussianSplatting",
    "GeometryMetadata",
    "GltfProperty",
    "InstanceFeatureID",
    "InstanceFeatures",
    "JsonModel",
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
    "MeshQuantization",
    "MeshoptCompression",
    "MeshoptFilter",
    "MeshoptMode",
    "NodePropertyMapping",
    "NormalTextureInfo",
    "PBRSpecularGlossiness",
    "PrimitiveOutline",
    "PrimitiveStructuralMetadata",
    "SceneBounds",
    "Schema",
    "SolarPanelGroup",
    "StageType",
    "StructuralMetadata",
    "TextureBasisu",
    "TextureInfo",
    "TextureWebp",
    "WorkItem",
    "defaulted",
    "is_default_channels",
    "validate_feature_id",
    "validate_work_item",
]

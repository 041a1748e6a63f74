from __future__ import annotations

from materials_explorer.domain.material import MaterialRecord
from materials_explorer.entrypoints.http.dtos.materials import (
    ElasticityDTO,
    MaterialCardDTO,
    MaterialDetailDTO,
    SymmetryDTO,
    ValidationReportDTO,
)


class MaterialMapper:
    """Maps domain material records to REST DTOs."""

    @staticmethod
    def to_detail(material: MaterialRecord) -> MaterialDetailDTO:
        """
        Converts a domain record to the full detail DTO.

        Absent nested objects stay null; they are never replaced by zeros.
        """
        elasticity = None
        if material.elasticity is not None:
            elasticity = ElasticityDTO(
                fitting_method=material.elasticity.fitting_method,
                bulk_modulus_vrh=material.elasticity.bulk_modulus_vrh,
                shear_modulus_vrh=material.elasticity.shear_modulus_vrh,
                young_modulus_vrh=material.elasticity.young_modulus_vrh,
            )

        validation = None
        if material.validation is not None:
            report = material.validation
            validation = ValidationReportDTO(
                status=report.status.value,
                relax_converged=report.relax_converged,
                scf_converged=report.scf_converged,
                has_elastic_outputs=report.has_elastic_outputs,
                dft_bulk_modulus=report.dft_bulk_modulus,
                dft_shear_modulus=report.dft_shear_modulus,
                dft_young_modulus=report.dft_young_modulus,
                dft_poisson_ratio=report.dft_poisson_ratio,
                dft_anisotropy=report.dft_anisotropy,
            )

        return MaterialDetailDTO(
            id=material.id,
            formula=material.display_formula,
            elements=list(material.elements),
            chemical_system=material.chemical_system,
            density=material.density,
            volume=material.volume,
            site_count=material.site_count,
            symmetry=SymmetryDTO(
                crystal_system=material.symmetry.crystal_system,
                point_group=material.symmetry.point_group,
                space_group_symbol=material.symmetry.space_group_symbol,
                space_group_number=material.symmetry.space_group_number,
            ),
            universal_anisotropy=material.universal_anisotropy,
            homogeneous_poisson=material.homogeneous_poisson,
            elasticity=elasticity,
            validation=validation,
            band_gap=material.band_gap,
            formation_energy_per_atom=material.formation_energy_per_atom,
            is_stable=material.is_stable,
            is_metal=material.is_metal,
        )

    @staticmethod
    def to_card(material: MaterialRecord, expanded: bool) -> MaterialCardDTO:
        """Converts a domain record to a result card, with detail only when expanded."""
        return MaterialCardDTO(
            id=material.id,
            formula=material.display_formula,
            elements=list(material.elements),
            crystal_system=material.crystal_system,
            density=material.density,
            band_gap=material.band_gap,
            is_stable=material.is_stable,
            is_metal=material.is_metal,
            expanded=expanded,
            detail=MaterialMapper.to_detail(material) if expanded else None,
        )

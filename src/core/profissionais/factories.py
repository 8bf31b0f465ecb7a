"""
Factories por tipo de profissional.

Cada tipo de profissional (psicólogo, nutricionista) tem uma factory
que sabe construir o profissional e validar o registro no conselho
(CRP, CRN). O ProfessionalFactoryProvider é um registro explícito,
montado na inicialização, indexado pelo TipoProfissional.

Novos tipos entram registrando uma nova factory, sem alterar o
provider.

Example:
    provider = criar_provider_padrao()
    factory = provider.obter_factory(TipoProfissional.PSICOLOGO)
    profissional = factory.criar_profissional(
        nome="Maria Oliveira",
        cpf="52998224725",
        registro_profissional="06/12345",
    )
"""

from datetime import date
from typing import Dict, Iterable, List, Optional, Protocol, runtime_checkable

from src.core.shared.exceptions import DomainValidationError, InvalidArgumentError
from src.core.shared.strings import is_blank

from .entities import (
    REGISTRO_MIN_LENGTH,
    ROTULO_REGISTRO,
    EstadoProfissional,
    Genero,
    ProfissionalEntity,
    TipoProfissional,
)


@runtime_checkable
class ProfessionalModuleFactory(Protocol):
    """Estratégia de criação para um tipo de profissional."""

    tipo: TipoProfissional
    rotulo_registro: str

    def criar_profissional(
        self,
        nome: str,
        cpf: str,
        registro_profissional: str,
        rg: Optional[str] = None,
        data_nascimento: Optional[date] = None,
        genero: Genero = Genero.NAO_INFORMADO,
    ) -> ProfissionalEntity:
        ...


class _ModuleFactoryBase:
    """Comportamento comum: pré-checagem do registro e criação da entidade."""

    tipo: TipoProfissional

    @property
    def rotulo_registro(self) -> str:
        return ROTULO_REGISTRO[self.tipo]

    def criar_profissional(
        self,
        nome: str,
        cpf: str,
        registro_profissional: str,
        rg: Optional[str] = None,
        data_nascimento: Optional[date] = None,
        genero: Genero = Genero.NAO_INFORMADO,
    ) -> ProfissionalEntity:
        """
        Raises:
            DomainValidationError: Se registro muito curto ou dados inválidos
        """
        if is_blank(registro_profissional) or len(registro_profissional.strip()) < REGISTRO_MIN_LENGTH:
            raise DomainValidationError([
                f"{self.rotulo_registro} inválido. Deve ter pelo menos "
                f"{REGISTRO_MIN_LENGTH} caracteres."
            ])

        return ProfissionalEntity.criar(
            tipo=self.tipo,
            nome=nome,
            cpf=cpf,
            registro_profissional=registro_profissional,
            rg=rg,
            data_nascimento=data_nascimento,
            genero=genero,
            estado=EstadoProfissional.ATIVO,
        )


class PsicologiaModuleFactory(_ModuleFactoryBase):
    tipo = TipoProfissional.PSICOLOGO


class NutricaoModuleFactory(_ModuleFactoryBase):
    tipo = TipoProfissional.NUTRICIONISTA


class ProfessionalFactoryProvider:
    """
    Registro de factories por tipo de profissional.

    Tipo não registrado é erro de configuração, nunca um padrão
    silencioso.
    """

    def __init__(self, factories: Iterable[ProfessionalModuleFactory]):
        self._factories: Dict[TipoProfissional, ProfessionalModuleFactory] = {}
        for factory in factories:
            self.registrar(factory)

    def registrar(self, factory: ProfessionalModuleFactory) -> None:
        """
        Raises:
            InvalidArgumentError: Se já houver factory para o tipo
        """
        if factory.tipo in self._factories:
            raise InvalidArgumentError(
                f"Já existe factory registrada para o tipo de profissional: "
                f"{factory.tipo.value}",
                field="tipo",
            )
        self._factories[factory.tipo] = factory

    def obter_factory(self, tipo: TipoProfissional) -> ProfessionalModuleFactory:
        """
        Raises:
            InvalidArgumentError: Se não houver factory para o tipo
        """
        factory = self._factories.get(tipo)
        if factory is None:
            nome = tipo.value if isinstance(tipo, TipoProfissional) else tipo
            raise InvalidArgumentError(
                f"Nenhuma factory registrada para o tipo de profissional: {nome}",
                field="tipo",
            )
        return factory

    @property
    def tipos_registrados(self) -> List[TipoProfissional]:
        return list(self._factories)


def criar_provider_padrao() -> ProfessionalFactoryProvider:
    """Provider com as factories embutidas (psicologia e nutrição)."""
    return ProfessionalFactoryProvider([
        PsicologiaModuleFactory(),
        NutricaoModuleFactory(),
    ])

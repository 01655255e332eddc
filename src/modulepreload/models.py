from pydantic import BaseModel, Field


class ModuleNode(BaseModel):
    specifier: str
    dependencies: list[str] = Field(default_factory=list)


class ModuleGraph(BaseModel):
    root: str
    modules: list[ModuleNode]

    @property
    def specifiers(self) -> list[str]:
        return [module.specifier for module in self.modules]

    def get(self, specifier: str) -> ModuleNode | None:
        for module in self.modules:
            if module.specifier == specifier:
                return module
        return None

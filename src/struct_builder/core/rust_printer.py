from struct_builder.models import BuilderPlan

_INDENT = "    "


def _vis(visibility: str) -> str:
    return f"{visibility} " if visibility else ""


def _builder_struct(plan: BuilderPlan) -> list[str]:
    lines = [f"{_vis(plan.builder_visibility)}struct {plan.builder_name} {{"]
    for field in plan.storage_fields:
        lines.append(f"{_INDENT}{_vis(field.visibility)}{field.name}: {field.storage_type.render()},")
    lines.append("}")
    return lines


def _factory_impl(plan: BuilderPlan) -> list[str]:
    i1, i2, i3 = _INDENT, _INDENT * 2, _INDENT * 3
    lines = [
        f"impl {plan.source_name} {{",
        f"{i1}{_vis(plan.source_visibility)}fn {plan.factory_name}() -> {plan.builder_name} {{",
        f"{i2}{plan.builder_name} {{",
    ]
    for field in plan.storage_fields:
        initial = "None" if field.initially_absent else "Default::default()"
        lines.append(f"{i3}{field.name}: {initial},")
    lines += [f"{i2}}}", f"{i1}}}", "}"]
    return lines


def _assembly_method(plan: BuilderPlan) -> list[str]:
    i1, i2, i3, i4 = _INDENT, _INDENT * 2, _INDENT * 3, _INDENT * 4
    lines = [
        f"{i1}pub fn {plan.assembly_name}(&self) -> "
        f"Result<{plan.source_name}, Box<dyn std::error::Error + 'static>> {{",
        f"{i2}Ok({plan.source_name} {{",
    ]
    for field in plan.assembly_fields:
        if field.is_optional:
            lines.append(f"{i3}{field.name}: self.{field.name}.clone(),")
            continue
        lines += [
            f"{i3}{field.name}: match &self.{field.name} {{",
            f"{i4}Some(v) => v.clone(),",
            f'{i4}None => return Err(format!("missing required field: {{}}", "{field.name}").into()),',
            f"{i3}}},",
        ]
    lines += [f"{i2}}})", f"{i1}}}"]
    return lines


def _setter(visibility: str, name: str, param_type: str) -> list[str]:
    i1, i2 = _INDENT, _INDENT * 2
    return [
        f"{i1}{_vis(visibility)}fn {name}(&mut self, arg: {param_type}) -> &mut Self {{",
        f"{i2}self.{name} = Some(arg);",
        f"{i2}self",
        f"{i1}}}",
    ]


def render_builder(plan: BuilderPlan) -> str:
    """Render a BuilderPlan as Rust declarations.

    Assumes the wrapper is constructed with ``Some``/``None`` and defaults to
    empty via ``Default``, as ``Option`` does.
    """
    builder_impl = [f"impl {plan.builder_name} {{", *_assembly_method(plan)]
    for setter in plan.setters:
        builder_impl.append("")
        builder_impl += _setter(setter.visibility, setter.name, setter.param_type.render())
    builder_impl.append("}")

    blocks = [_builder_struct(plan), _factory_impl(plan), builder_impl]
    return "\n\n".join("\n".join(block) for block in blocks) + "\n"

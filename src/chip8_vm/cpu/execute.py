"""Instruction execution: implements every CHIP-8 operation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..memory.address import MemoryAddress, RegisterIndex
from ..memory.font import font_address
from .decode import Instruction, Op
from .registers import VF, RegisterFile

if TYPE_CHECKING:
    from .cpu import CPU

INSTRUCTION_SIZE = 2

_ALU_OPS = frozenset({
    Op.ILD, Op.IADD, Op.RLD, Op.ROR, Op.RAND, Op.RXOR,
    Op.RADD, Op.RSUB, Op.RSUBN, Op.SHR, Op.SHL,
})

_SKIP_OPS = frozenset({
    Op.ISE, Op.ISNE, Op.RSE, Op.RSNE, Op.SKP, Op.SKNP,
})

_TIMER_OPS = frozenset({Op.LDDT, Op.SETDT, Op.SETST})

_INDEX_OPS = frozenset({
    Op.LDI, Op.ADDI, Op.LDFI, Op.LDBCD, Op.DUMP, Op.LOAD,
})


def execute(inst: Instruction, cpu: CPU) -> MemoryAddress:
    """Execute a decoded instruction. Returns the next PC value.

    Raises:
        StackOverflow: CALL with a full call stack.
        StackUnderflow: RET with an empty call stack.
    """
    pc = cpu.pc
    next_pc = pc + INSTRUCTION_SIZE

    op = inst.op
    if op in _ALU_OPS:
        _exec_alu(inst, cpu.registers)
        return next_pc

    elif op in _SKIP_OPS:
        if _skip_condition(inst, cpu):
            return next_pc + INSTRUCTION_SIZE
        return next_pc

    elif op in _INDEX_OPS:
        _exec_index(inst, cpu)
        return next_pc

    elif op in _TIMER_OPS:
        _exec_timer(inst, cpu)
        return next_pc

    elif op == Op.JP:
        return inst.addr

    elif op == Op.JPV0:
        return inst.addr + cpu.registers.read(0)

    elif op == Op.CALL:
        cpu.stack.push(next_pc)
        return inst.addr

    elif op == Op.RET:
        return cpu.stack.pop()

    elif op == Op.CLS:
        cpu.display.clear()
        cpu.sync_display_mirror()
        return next_pc

    elif op == Op.DRW:
        return _exec_draw(inst, cpu, next_pc)

    elif op == Op.RND:
        value = int(cpu.rng.integers(0, 256))
        cpu.registers.write(inst.x, value & inst.byte)
        return next_pc

    elif op == Op.LDK:
        return _exec_wait_key(inst, cpu, pc, next_pc)

    elif op == Op.SYS:
        return next_pc

    else:
        raise ValueError(f"Unimplemented operation: {op}")


def _exec_alu(inst: Instruction, regs: RegisterFile) -> None:
    """Register loads, bitwise ops, add/subtract with VF flag, shifts."""
    x = inst.x
    op = inst.op

    if op == Op.ILD:
        regs.write(x, inst.byte)
        return
    if op == Op.IADD:  # no carry flag
        regs.write(x, regs.read(x) + inst.byte)
        return

    vx = regs.read(x)
    if op == Op.SHR:
        regs.write(x, vx >> 1)
        regs.write(VF, vx & 0x1)
        return
    if op == Op.SHL:
        regs.write(x, vx << 1)
        regs.write(VF, (vx >> 7) & 0x1)
        return

    vy = regs.read(inst.y)

    if op == Op.RLD:
        regs.write(x, vy)
    elif op == Op.ROR:
        regs.write(x, vx | vy)
    elif op == Op.RAND:
        regs.write(x, vx & vy)
    elif op == Op.RXOR:
        regs.write(x, vx ^ vy)
    elif op == Op.RADD:
        total = vx + vy
        regs.write(x, total)
        regs.write(VF, 1 if total > 0xFF else 0)
    elif op == Op.RSUB:
        regs.write(x, vx - vy)
        regs.write(VF, 1 if vx >= vy else 0)
    elif op == Op.RSUBN:
        regs.write(x, vy - vx)
        regs.write(VF, 1 if vy >= vx else 0)
    else:
        raise ValueError(f"Not an ALU operation: {op}")


def _skip_condition(inst: Instruction, cpu: CPU) -> bool:
    """Evaluate the condition of a conditional skip."""
    regs = cpu.registers
    vx = regs.read(inst.x)
    op = inst.op

    if op == Op.ISE:
        return vx == inst.byte
    if op == Op.ISNE:
        return vx != inst.byte
    if op == Op.SKP:
        return cpu.keyboard.key_is_pressed(vx & 0xF)
    if op == Op.SKNP:
        return not cpu.keyboard.key_is_pressed(vx & 0xF)

    vy = regs.read(inst.y)
    if op == Op.RSE:
        return vx == vy
    if op == Op.RSNE:
        return vx != vy
    raise ValueError(f"Not a skip operation: {op}")


def _exec_index(inst: Instruction, cpu: CPU) -> None:
    """Operations on the index register I and the memory it points at."""
    regs = cpu.registers
    mem = cpu.memory
    op = inst.op

    if op == Op.LDI:
        regs.index = inst.addr
        return

    x = inst.x
    if op == Op.ADDI:
        regs.index = regs.index + regs.read(x)
    elif op == Op.LDFI:
        regs.index = MemoryAddress(font_address(regs.read(x)))
    elif op == Op.LDBCD:
        vx = regs.read(x)
        mem.write_block(regs.index, bytes([vx // 100, (vx // 10) % 10, vx % 10]))
    elif op == Op.DUMP:
        values = regs.snapshot()[: int(x) + 1]
        mem.write_block(regs.index, bytes(values))
    elif op == Op.LOAD:
        for i, value in enumerate(mem.read_block(regs.index, int(x) + 1)):
            regs.write(RegisterIndex(i), value)
    else:
        raise ValueError(f"Not an index operation: {op}")


def _exec_timer(inst: Instruction, cpu: CPU) -> None:
    """Delay/sound timer load and store."""
    regs = cpu.registers
    if inst.op == Op.LDDT:
        regs.write(inst.x, cpu.timers.delay)
    elif inst.op == Op.SETDT:
        cpu.timers.set_delay(regs.read(inst.x))
    elif inst.op == Op.SETST:
        cpu.timers.set_sound(regs.read(inst.x))
    else:
        raise ValueError(f"Not a timer operation: {inst.op}")


def _exec_draw(inst: Instruction, cpu: CPU, next_pc: MemoryAddress) -> MemoryAddress:
    """DRW Vx, Vy, n: blit n sprite rows from I, VF = collision."""
    regs = cpu.registers
    rows = cpu.memory.read_block(regs.index, inst.nibble)
    collision = cpu.display.blit_sprite(rows, regs.read(inst.x), regs.read(inst.y))
    regs.write(VF, 1 if collision else 0)
    cpu.sync_display_mirror()
    return next_pc


def _exec_wait_key(
    inst: Instruction, cpu: CPU, pc: MemoryAddress, next_pc: MemoryAddress,
) -> MemoryAddress:
    """LDK Vx: store the lowest pressed key, or stay on this instruction.

    Leaving PC unchanged makes the host's next step() execute LDK again, so
    the wait never blocks inside the engine.
    """
    for key in range(16):
        if cpu.keyboard.key_is_pressed(key):
            cpu.registers.write(inst.x, key)
            cpu.waiting_for_key = False
            return next_pc
    cpu.waiting_for_key = True
    return pc
